"""
wikipedia/sql.py

Write the MySQL import script for the Wikipedia link tables:

    python manage.py dump_wikipedia_links dewiki-...-pages-articles.xml.bz2 > result.sql
    mysql thesaurus < result.sql

The script recreates wikipedia_pages and wikipedia_links, inserts one row per
page and per link, and adds the indexes at the end (faster than indexing
while inserting).
"""
from typing import IO, Iterable

from .dump import DumpPage

HEADER = (
    "SET NAMES utf8;",
    "DROP TABLE IF EXISTS wikipedia_pages;",
    "CREATE TABLE `wikipedia_pages` ( "
    "`page_id` INT NOT NULL AUTO_INCREMENT PRIMARY KEY , "
    "`title` VARCHAR( 100 ) NOT NULL "
    ") ENGINE = MYISAM;",
    "DROP TABLE IF EXISTS wikipedia_links;",
    "CREATE TABLE `wikipedia_links` ( "
    " `link_id` INT NOT NULL AUTO_INCREMENT PRIMARY KEY , "
    " `page_id` INT NOT NULL , "
    " `link` VARCHAR( 100 ) NOT NULL "
    ") ENGINE = MYISAM;",
)

FOOTER = (
    "ALTER TABLE `wikipedia_pages` ADD INDEX ( `page_id` );",
    "ALTER TABLE `wikipedia_pages` ADD INDEX ( `title` );",
    "ALTER TABLE `wikipedia_links` ADD INDEX ( `page_id` );",
)


def escape(value: str) -> str:
    """Quote for a single-quoted MySQL literal: double ' and drop backslashes."""
    return value.replace("'", "''").replace("\\", "")


def page_statements(page: DumpPage):
    yield f"INSERT INTO wikipedia_pages VALUES ({page.page_id}, '{escape(page.title)}');"
    for link in page.links:
        yield f"INSERT INTO wikipedia_links (page_id, link) VALUES ({page.page_id}, '{escape(link)}');"


def write_sql_dump(pages: Iterable[DumpPage], out: IO[str]) -> int:
    """Write the whole script to out. Returns the number of pages written."""
    count = 0
    for line in HEADER:
        out.write(line + "\n")
    for page in pages:
        for line in page_statements(page):
            out.write(line + "\n")
        count += 1
    for line in FOOTER:
        out.write(line + "\n")
    return count
