# student_store.py (MySQL-backed Student Store)
import logging
import uuid
from contextlib import contextmanager
from dataclasses import replace

import mysql.connector

from .mapping import student_from_row, student_to_row

logger = logging.getLogger(__name__)

# seq keeps insertion order, id is the opaque store-assigned key.
# Binary collation: ids, names and college ids match exactly, case included.
SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS student (
    seq BIGINT NOT NULL AUTO_INCREMENT UNIQUE,
    id VARCHAR(255) NOT NULL PRIMARY KEY,
    name TEXT,
    address TEXT,
    age TEXT,
    college_id VARCHAR(255),
    INDEX idx_student_name (name(255)),
    INDEX idx_student_college_id (college_id)
) DEFAULT CHARSET=utf8mb4 COLLATE=utf8mb4_bin
"""

COLUMNS = "id, name, address, age, college_id"

# row alias form, MySQL 8.0.19+
UPSERT_SQL = (
    f"INSERT INTO student ({COLUMNS}) VALUES (%s, %s, %s, %s, %s) AS new "
    "ON DUPLICATE KEY UPDATE name=new.name, address=new.address, "
    "age=new.age, college_id=new.college_id"
)


class StoreError(Exception):
    """The persistence layer is unreachable or rejected the operation."""


class MySQLStudentStore:
    def __init__(self, db_config, connect=mysql.connector.connect):
        self._db_config = dict(db_config)
        self._connect = connect

    @contextmanager
    def _cursor(self, commit=False):
        conn = cur = None
        try:
            conn = self._connect(**self._db_config)
            cur = conn.cursor(dictionary=True, buffered=True)
            yield cur
            if commit:
                conn.commit()
        except mysql.connector.Error as e:
            logger.error("student store error: %s", e)
            raise StoreError(str(e)) from e
        finally:
            if cur is not None:
                cur.close()
            if conn is not None:
                conn.close()

    def init_schema(self):
        with self._cursor(commit=True) as cur:
            cur.execute(SCHEMA_SQL)

    # ---------------------------------------------------
    # CRUD
    # ---------------------------------------------------
    def save(self, student):
        if not student.id:
            student = replace(student, id=uuid.uuid4().hex)
        with self._cursor(commit=True) as cur:
            cur.execute(UPSERT_SQL, student_to_row(student))
        return student

    def find_all(self):
        with self._cursor() as cur:
            cur.execute(f"SELECT {COLUMNS} FROM student ORDER BY seq")
            return [student_from_row(r) for r in cur.fetchall()]

    def find_by_id(self, student_id):
        with self._cursor() as cur:
            cur.execute(f"SELECT {COLUMNS} FROM student WHERE id=%s", (student_id,))
            row = cur.fetchone()
        return student_from_row(row) if row else None

    def find_by_name(self, name):
        # duplicate names: first stored wins
        with self._cursor() as cur:
            cur.execute(
                f"SELECT {COLUMNS} FROM student WHERE name=%s ORDER BY seq LIMIT 1",
                (name,),
            )
            row = cur.fetchone()
        return student_from_row(row) if row else None

    def find_by_college_id(self, college_id):
        with self._cursor() as cur:
            cur.execute(
                f"SELECT {COLUMNS} FROM student WHERE college_id=%s ORDER BY seq",
                (college_id,),
            )
            return [student_from_row(r) for r in cur.fetchall()]

    def delete_by_id(self, student_id):
        with self._cursor(commit=True) as cur:
            cur.execute("DELETE FROM student WHERE id=%s", (student_id,))
