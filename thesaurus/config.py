"""
thesaurus/config.py

Typed access to the thesaurus constants in settings.

The taxonomy root is the synset at the top of the noun hierarchy. Pages get
it as an immutable value (TaxonomyRoot) instead of reading settings while
they render, so a render function depends only on its arguments.
"""
from dataclasses import dataclass

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured


@dataclass(frozen=True)
class TaxonomyRoot:
    synset_id: int
    name: str

    def __post_init__(self):
        if isinstance(self.synset_id, bool) or not isinstance(self.synset_id, int) or self.synset_id <= 0:
            raise ImproperlyConfigured(f"TOP_SYNSET_ID must be a positive integer, got {self.synset_id!r}")
        if not isinstance(self.name, str) or not self.name.strip():
            raise ImproperlyConfigured("TOP_SYNSET_NAME must be a non-empty string")


def get_taxonomy_root() -> TaxonomyRoot:
    """Build the taxonomy root from TOP_SYNSET_ID / TOP_SYNSET_NAME."""
    return TaxonomyRoot(
        synset_id=getattr(settings, "TOP_SYNSET_ID", None),
        name=getattr(settings, "TOP_SYNSET_NAME", None),
    )
