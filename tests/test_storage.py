import sqlite3

import pytest

from plumlabs.article import Article
from plumlabs.storage import (
    ArticleNotFound,
    delete_article,
    get_all_articles,
    get_article_by_id,
    get_article_by_title,
    init_schema,
    insert_article,
    open_database,
    update_article,
)


@pytest.fixture
def conn():
    connection = open_database(":memory:")
    yield connection
    connection.close()


def _article(title="first", md="# md", html="<h1>md</h1>"):
    return Article(title=title, md_content=md, html_content=html)


def test_insert_and_get_by_title_round_trip(conn):
    new_id = insert_article(conn, _article())
    stored = get_article_by_title(conn, "first")
    assert stored.id == new_id
    assert stored.title == "first"
    assert stored.md_content == "# md"
    assert stored.html_content == "<h1>md</h1>"
    assert stored.last_update


def test_insert_ids_increase(conn):
    first = insert_article(conn, _article("a"))
    second = insert_article(conn, _article("b"))
    assert second > first


def test_duplicate_title_raises(conn):
    insert_article(conn, _article())
    with pytest.raises(sqlite3.IntegrityError):
        insert_article(conn, _article())


def test_get_by_id(conn):
    new_id = insert_article(conn, _article("byid"))
    assert get_article_by_id(conn, new_id).title == "byid"


def test_missing_title_raises(conn):
    with pytest.raises(ArticleNotFound):
        get_article_by_title(conn, "missing")


def test_missing_id_raises(conn):
    with pytest.raises(ArticleNotFound):
        get_article_by_id(conn, 42)


def test_get_all_articles(conn):
    insert_article(conn, _article("a"))
    insert_article(conn, _article("b"))
    assert [a.title for a in get_all_articles(conn)] == ["a", "b"]


def test_get_all_articles_empty(conn):
    assert get_all_articles(conn) == []


def test_update_article(conn):
    new_id = insert_article(conn, _article())
    update_article(
        conn, Article(id=new_id, title="first", md_content="new", html_content="NEW")
    )
    stored = get_article_by_title(conn, "first")
    assert (stored.md_content, stored.html_content) == ("new", "NEW")


def test_delete_article(conn):
    insert_article(conn, _article("gone"))
    delete_article(conn, "gone")
    with pytest.raises(ArticleNotFound):
        get_article_by_title(conn, "gone")


def test_init_schema_is_idempotent(conn):
    insert_article(conn, _article("kept"))
    init_schema(conn)
    assert get_article_by_title(conn, "kept").title == "kept"


def test_open_database_file_persists(tmp_path):
    path = str(tmp_path / "db.sqlite")
    first = open_database(path)
    insert_article(first, _article("persist"))
    first.close()
    second = open_database(path)
    try:
        assert get_article_by_title(second, "persist").md_content == "# md"
    finally:
        second.close()