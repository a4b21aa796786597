from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="WikipediaPage",
            fields=[
                ("page_id", models.PositiveIntegerField(primary_key=True, serialize=False)),
                ("title", models.CharField(db_index=True, help_text="Article title as in the dump.", max_length=100)),
            ],
            options={
                "ordering": ["page_id"],
                "db_table": "wikipedia_pages",
            },
        ),
        migrations.CreateModel(
            name="WikipediaLink",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("link", models.CharField(help_text="Title of the linked article.", max_length=100)),
                (
                    "page",
                    models.ForeignKey(
                        db_column="page_id",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="links",
                        to="wikipedia.wikipediapage",
                    ),
                ),
            ],
            options={
                "ordering": ["page", "id"],
                "db_table": "wikipedia_links",
            },
        ),
    ]
