"""
SQLite 어댑터

가계부 DB 연결과 쓰기 트랜잭션, 스키마 생성.
요청마다 연결을 열고 닫는다 (조회는 읽기 전용 연결).

쓰기 실패 처리:
- 무결성 위반(aiosqlite.IntegrityError)은 롤백 후 그대로 전파 (저장소가 도메인 에러로 변환)
- 그 외 aiosqlite.Error는 롤백 후 InternalError로 변환 (HTTP 500)
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, AsyncIterator

import aiosqlite

from core.constants import Limits
from core.errors import InternalError

logger = logging.getLogger(__name__)

Params = tuple[Any, ...]


def fits_sqlite_integer(value: int) -> bool:
    """SQLite INTEGER 컬럼에 바인딩 가능한 정수인지

    범위를 넘는 정수를 바인딩하면 sqlite3가 OverflowError를 낸다.
    """
    return -Limits.ID_MAX - 1 <= value <= Limits.ID_MAX


async def create_connection(
    db_path: Path | str,
    readonly: bool = False,
) -> aiosqlite.Connection:
    """가계부 DB 연결 열기

    Args:
        db_path: DB 파일 경로 (상위 디렉토리는 자동 생성)
        readonly: True면 mode=ro URI로 연다

    Returns:
        PRAGMA 설정이 끝난 aiosqlite 연결
    """
    path = Path(db_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    if readonly:
        conn = await aiosqlite.connect(f"file:{path}?mode=ro", uri=True)
    else:
        conn = await aiosqlite.connect(str(path))
        # 읽기 전용 연결은 쓰기 연결이 정한 journal 모드를 따른다
        await conn.execute("PRAGMA journal_mode=WAL")

    await conn.execute("PRAGMA busy_timeout=30000")
    # ON DELETE RESTRICT가 동작하려면 연결마다 켜야 함
    await conn.execute("PRAGMA foreign_keys=ON")

    logger.debug("DB 연결", extra={"db_path": str(path), "readonly": readonly})
    return conn


class SQLiteAdapter:
    """가계부 DB 어댑터

    조회는 fetchone/fetchall, 레코드 쓰기는 transaction() 블록 안에서.

    Args:
        db_path: DB 파일 경로
        readonly: 읽기 전용 여부 (GET 요청용)
    """

    def __init__(self, db_path: Path | str, readonly: bool = False):
        self.db_path = Path(db_path)
        self.readonly = readonly
        self._conn: aiosqlite.Connection | None = None

    @property
    def is_connected(self) -> bool:
        return self._conn is not None

    def _require_conn(self) -> aiosqlite.Connection:
        if self._conn is None:
            raise RuntimeError("Not connected to database")
        return self._conn

    async def connect(self) -> None:
        if self._conn is None:
            self._conn = await create_connection(self.db_path, self.readonly)

    async def close(self) -> None:
        if self._conn is None:
            return
        await self._conn.close()
        self._conn = None
        logger.debug("DB 연결 종료")

    async def execute(self, sql: str, parameters: Params | None = None) -> aiosqlite.Cursor:
        return await self._require_conn().execute(sql, parameters or ())

    async def fetchone(self, sql: str, parameters: Params | None = None) -> tuple[Any, ...] | None:
        cursor = await self.execute(sql, parameters)
        return await cursor.fetchone()

    async def fetchall(self, sql: str, parameters: Params | None = None) -> list[tuple[Any, ...]]:
        cursor = await self.execute(sql, parameters)
        return list(await cursor.fetchall())

    async def commit(self) -> None:
        await self._require_conn().commit()

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[aiosqlite.Connection]:
        """쓰기 트랜잭션

        블록이 정상 종료하면 커밋, 예외가 나면 롤백.
        IntegrityError는 그대로, 나머지 DB 오류는 InternalError로 올린다.
        """
        conn = self._require_conn()
        try:
            yield conn
            await conn.commit()
        except aiosqlite.IntegrityError:
            await conn.rollback()
            raise
        except aiosqlite.Error as e:
            await conn.rollback()
            logger.error(f"DB 쓰기 실패: {e}", extra={"db_path": str(self.db_path)})
            raise InternalError("Database write failed") from e
        except Exception:
            await conn.rollback()
            raise

    async def __aenter__(self) -> "SQLiteAdapter":
        await self.connect()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()


async def init_schema(adapter: SQLiteAdapter) -> None:
    """스키마 초기화 (테이블 생성)

    Args:
        adapter: 연결된 SQLiteAdapter

    주의: Web 시작 시(lifespan)와 seed 스크립트에서 호출.
    금액은 Decimal TEXT로 저장 (집계는 프로세스 내에서 정확히 계산).
    """
    # categories
    await adapter.execute("""
        CREATE TABLE IF NOT EXISTS categories (
            id           INTEGER PRIMARY KEY AUTOINCREMENT,
            name         TEXT NOT NULL,
            type         TEXT NOT NULL CHECK (type IN ('income', 'expense')),
            color        TEXT NOT NULL DEFAULT '#3b82f6',
            icon         TEXT NOT NULL DEFAULT '💰',

            created_at   TEXT NOT NULL DEFAULT (datetime('now'))
        )
    """)

    # transactions (카테고리 참조 중이면 삭제 불가)
    await adapter.execute("""
        CREATE TABLE IF NOT EXISTS transactions (
            id           INTEGER PRIMARY KEY AUTOINCREMENT,
            amount       TEXT NOT NULL,
            type         TEXT NOT NULL CHECK (type IN ('income', 'expense')),
            category_id  INTEGER NOT NULL
                         REFERENCES categories(id) ON DELETE RESTRICT,
            description  TEXT,
            date         TEXT NOT NULL,

            created_at   TEXT NOT NULL DEFAULT (datetime('now')),
            updated_at   TEXT NOT NULL DEFAULT (datetime('now'))
        )
    """)

    # goals
    await adapter.execute("""
        CREATE TABLE IF NOT EXISTS goals (
            id              INTEGER PRIMARY KEY AUTOINCREMENT,
            name            TEXT NOT NULL,
            target_amount   TEXT NOT NULL,
            current_amount  TEXT NOT NULL DEFAULT '0',
            deadline        TEXT,

            created_at      TEXT NOT NULL DEFAULT (datetime('now')),
            updated_at      TEXT NOT NULL DEFAULT (datetime('now'))
        )
    """)

    # 인덱스 생성
    await adapter.execute("""
        CREATE INDEX IF NOT EXISTS ix_transactions_date
        ON transactions(date)
    """)

    await adapter.execute("""
        CREATE INDEX IF NOT EXISTS ix_transactions_category
        ON transactions(category_id)
    """)

    await adapter.commit()

    logger.info("스키마 초기화 완료")
