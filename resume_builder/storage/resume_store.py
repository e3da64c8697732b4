from __future__ import annotations

import hashlib
import json
import logging
import os
import secrets
import sqlite3
import threading
import uuid
from datetime import datetime, timezone
from typing import Any

from pydantic.alias_generators import to_camel

from resume_builder.core.errors import ConflictError, ValidationFailed
from resume_builder.schemas.resume import Resume, ResumeCreate, ResumeUpdate
from resume_builder.schemas.user import User, UserCreate

logger = logging.getLogger(__name__)

_SECTION_COLUMNS: dict[str, str] = {
    "personal_info": "personal_info_json",
    "experience": "experience_json",
    "education": "education_json",
    "skills": "skills_json",
    "projects": "projects_json",
    "certifications": "certifications_json",
    "achievements": "achievements_json",
}
_SCALAR_COLUMNS: dict[str, str] = {
    "user_id": "user_id",
    "title": "title",
    "template": "template",
    "is_public": "is_public",
}
_RESUME_SELECT = """
    SELECT id, user_id, title, personal_info_json, experience_json, education_json,
           skills_json, projects_json, certifications_json, achievements_json,
           template, is_public, created_at, updated_at
    FROM resumes
"""
_PBKDF2_ITERATIONS = 200_000


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def hash_password(password: str, *, salt: str | None = None) -> str:
    salt = salt or secrets.token_hex(16)
    digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), bytes.fromhex(salt), _PBKDF2_ITERATIONS)
    return f"pbkdf2_sha256${_PBKDF2_ITERATIONS}${salt}${digest.hex()}"


def _dump_section(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False)


class ResumeStore:
    """sqlite-backed persistence for users and resumes.

    One connection is shared across request threads and guarded by a lock.
    Updates are last-write-wins; there is no versioning or soft delete.
    """

    def __init__(self, db_path: str) -> None:
        self._db_path = db_path
        self._conn: sqlite3.Connection | None = None
        self._lock = threading.Lock()

    @property
    def db_path(self) -> str:
        return self._db_path

    def open(self) -> None:
        with self._lock:
            if self._conn is not None:
                return

            if self._db_path != ":memory:":
                directory = os.path.dirname(self._db_path)
                if directory:
                    os.makedirs(directory, exist_ok=True)

            conn = sqlite3.connect(
                self._db_path,
                check_same_thread=False,
                timeout=5,
                isolation_level=None,
            )
            conn.execute("PRAGMA journal_mode=WAL;")
            conn.execute("PRAGMA synchronous=NORMAL;")
            conn.execute("PRAGMA busy_timeout=5000;")
            conn.execute("PRAGMA foreign_keys=ON;")
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS users (
                    id TEXT PRIMARY KEY,
                    username TEXT NOT NULL UNIQUE,
                    email TEXT NOT NULL UNIQUE,
                    password_hash TEXT NOT NULL,
                    created_at TEXT NOT NULL
                );
                """
            )
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS resumes (
                    id TEXT PRIMARY KEY,
                    user_id TEXT NOT NULL REFERENCES users (id),
                    title TEXT NOT NULL,
                    personal_info_json TEXT NOT NULL,
                    experience_json TEXT NOT NULL,
                    education_json TEXT NOT NULL,
                    skills_json TEXT NOT NULL,
                    projects_json TEXT NOT NULL,
                    certifications_json TEXT NOT NULL,
                    achievements_json TEXT NOT NULL,
                    template TEXT NOT NULL DEFAULT 'modern',
                    is_public INTEGER NOT NULL DEFAULT 0,
                    created_at TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                );
                """
            )
            conn.execute(
                """
                CREATE INDEX IF NOT EXISTS idx_resumes_user_id
                ON resumes (user_id);
                """
            )
            self._conn = conn
        logger.info("resume_store_opened path=%s", self._db_path)

    def close(self) -> None:
        with self._lock:
            if self._conn is None:
                return
            self._conn.close()
            self._conn = None

    def _connection(self) -> sqlite3.Connection:
        if self._conn is None:
            self.open()
        assert self._conn is not None
        return self._conn

    # Users

    def create_user(self, payload: UserCreate) -> User:
        conn = self._connection()
        user_id = uuid.uuid4().hex
        created_at = _utc_now()
        password_hash = hash_password(payload.password)
        with self._lock:
            try:
                conn.execute(
                    """
                    INSERT INTO users (id, username, email, password_hash, created_at)
                    VALUES (?, ?, ?, ?, ?)
                    """,
                    (
                        user_id,
                        payload.username,
                        payload.email.lower(),
                        password_hash,
                        created_at.isoformat(),
                    ),
                )
            except sqlite3.IntegrityError as exc:
                raise ConflictError("Username or email is already registered.") from exc
        return User(id=user_id, username=payload.username, email=payload.email.lower(), created_at=created_at)

    def _get_user_where(self, column: str, value: str) -> User | None:
        conn = self._connection()
        with self._lock:
            row = conn.execute(
                f"SELECT id, username, email, created_at FROM users WHERE {column} = ?",
                (value,),
            ).fetchone()
        if not row:
            return None
        return User(id=row[0], username=row[1], email=row[2], created_at=datetime.fromisoformat(row[3]))

    def get_user(self, user_id: str) -> User | None:
        return self._get_user_where("id", user_id)

    def get_user_by_username(self, username: str) -> User | None:
        return self._get_user_where("username", username)

    def get_user_by_email(self, email: str) -> User | None:
        return self._get_user_where("email", email.strip().lower())

    # Resumes

    def create_resume(self, payload: ResumeCreate) -> Resume:
        conn = self._connection()
        resume_id = uuid.uuid4().hex
        now = _utc_now().isoformat()
        data = payload.model_dump(by_alias=True)
        with self._lock:
            try:
                conn.execute(
                    """
                    INSERT INTO resumes (
                        id, user_id, title, personal_info_json, experience_json, education_json,
                        skills_json, projects_json, certifications_json, achievements_json,
                        template, is_public, created_at, updated_at
                    ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                    """,
                    (
                        resume_id,
                        payload.user_id,
                        payload.title,
                        _dump_section(data["personalInfo"]),
                        _dump_section(data["experience"]),
                        _dump_section(data["education"]),
                        _dump_section(data["skills"]),
                        _dump_section(data["projects"]),
                        _dump_section(data["certifications"]),
                        _dump_section(data["achievements"]),
                        payload.template,
                        1 if payload.is_public else 0,
                        now,
                        now,
                    ),
                )
            except sqlite3.IntegrityError as exc:
                raise ValidationFailed(f"User '{payload.user_id}' does not exist.") from exc
        resume = self.get_resume(resume_id)
        assert resume is not None
        return resume

    def get_resume(self, resume_id: str) -> Resume | None:
        conn = self._connection()
        with self._lock:
            row = conn.execute(_RESUME_SELECT + " WHERE id = ?", (resume_id,)).fetchone()
        if not row:
            return None
        return self._row_to_resume(row)

    def list_resumes_by_user(self, user_id: str) -> list[Resume]:
        conn = self._connection()
        with self._lock:
            rows = conn.execute(
                _RESUME_SELECT + " WHERE user_id = ? ORDER BY updated_at DESC",
                (user_id,),
            ).fetchall()
        return [self._row_to_resume(row) for row in rows]

    def update_resume(self, resume_id: str, payload: ResumeUpdate) -> Resume | None:
        changes = payload.model_dump(exclude_unset=True, by_alias=False)
        dumped = payload.model_dump(exclude_unset=True, by_alias=True)
        assignments: list[str] = []
        params: list[Any] = []
        for field_name, value in changes.items():
            if field_name in _SECTION_COLUMNS:
                assignments.append(f"{_SECTION_COLUMNS[field_name]} = ?")
                params.append(_dump_section(dumped[to_camel(field_name)]))
            elif field_name in _SCALAR_COLUMNS:
                assignments.append(f"{_SCALAR_COLUMNS[field_name]} = ?")
                params.append((1 if value else 0) if field_name == "is_public" else value)

        assignments.append("updated_at = ?")
        params.append(_utc_now().isoformat())
        params.append(resume_id)

        conn = self._connection()
        with self._lock:
            try:
                cur = conn.execute(
                    f"UPDATE resumes SET {', '.join(assignments)} WHERE id = ?",
                    tuple(params),
                )
            except sqlite3.IntegrityError as exc:
                raise ValidationFailed(f"User '{payload.user_id}' does not exist.") from exc
            updated = int(cur.rowcount or 0)
        if not updated:
            return None
        return self.get_resume(resume_id)

    def delete_resume(self, resume_id: str) -> bool:
        conn = self._connection()
        with self._lock:
            cur = conn.execute("DELETE FROM resumes WHERE id = ?", (resume_id,))
            return bool(cur.rowcount)

    @staticmethod
    def _row_to_resume(row: tuple) -> Resume:
        return Resume.model_validate(
            {
                "id": row[0],
                "userId": row[1],
                "title": row[2],
                "personalInfo": json.loads(row[3]),
                "experience": json.loads(row[4]),
                "education": json.loads(row[5]),
                "skills": json.loads(row[6]),
                "projects": json.loads(row[7]),
                "certifications": json.loads(row[8]),
                "achievements": json.loads(row[9]),
                "template": row[10],
                "isPublic": bool(row[11]),
                "createdAt": datetime.fromisoformat(row[12]),
                "updatedAt": datetime.fromisoformat(row[13]),
            }
        )
