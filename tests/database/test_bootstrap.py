from pathlib import Path

from src.hajj_dashboard.hajj_dashboard.database.bootstrap import _iter_sql_statements, _strip_create_db_and_use


def test_create_database_and_use_are_stripped():
    sql = "CREATE DATABASE IF NOT EXISTS hajj_dashboard;\nUSE hajj_dashboard;\nCREATE TABLE t (a INT);\n"

    assert _strip_create_db_and_use(sql).strip() == "CREATE TABLE t (a INT);"


def test_semicolons_inside_quotes_do_not_split():
    sql = "INSERT INTO t VALUES ('a;b');\nINSERT INTO t VALUES (\"c;d\");\nSELECT 'it\\'s;'"

    assert list(_iter_sql_statements(sql)) == [
        "INSERT INTO t VALUES ('a;b')",
        'INSERT INTO t VALUES ("c;d")',
        "SELECT 'it\\'s;'",
    ]


def test_bundled_schema_creates_the_store_table():
    schema = Path(__file__).resolve().parents[2] / "database" / "schema.sql"

    statements = list(_iter_sql_statements(_strip_create_db_and_use(schema.read_text(encoding="utf-8"))))

    assert len(statements) == 1
    assert "CREATE TABLE IF NOT EXISTS kv_store" in statements[0]


def test_comments_are_dropped_even_with_semicolons():
    sql = "-- first; still a comment\nCREATE TABLE a (x INT); -- trailing; note\nINSERT INTO a VALUES ('--; kept');\n"

    assert list(_iter_sql_statements(sql)) == [
        "CREATE TABLE a (x INT)",
        "INSERT INTO a VALUES ('--; kept')",
    ]
