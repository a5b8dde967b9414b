"""
SQLite 어댑터

WAL 모드로 SQLite 연결 관리.
여러 요청이 동시에 접근 가능하도록 설정.

주의: SQLite alias로 time, count 사용 금지 (예약어)
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, AsyncIterator

import aiosqlite

logger = logging.getLogger(__name__)


async def create_connection(
    db_path: Path | str,
    readonly: bool = False,
) -> aiosqlite.Connection:
    """SQLite 연결 생성 (WAL 모드)

    Args:
        db_path: DB 파일 경로 (":memory:" 허용)
        readonly: 읽기 전용 여부

    Returns:
        aiosqlite 연결 객체
    """
    db_path_str = str(db_path)
    in_memory = db_path_str == ":memory:"

    # 디렉토리가 없으면 생성
    if not in_memory:
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    if readonly and not in_memory:
        conn = await aiosqlite.connect(f"file:{db_path_str}?mode=ro", uri=True)
    else:
        conn = await aiosqlite.connect(db_path_str)

    # WAL 모드 설정
    await conn.execute("PRAGMA journal_mode=WAL")

    # 동시 접근 설정
    await conn.execute("PRAGMA busy_timeout=30000")  # 30초 대기

    # 외래 키 제약 활성화
    await conn.execute("PRAGMA foreign_keys=ON")

    logger.debug(
        "SQLite 연결 생성",
        extra={"db_path": db_path_str, "readonly": readonly},
    )

    return conn


class SQLiteAdapter:
    """SQLite 어댑터

    WAL 모드로 SQLite 연결 관리.
    트랜잭션 컨텍스트 매니저 제공.

    Args:
        db_path: DB 파일 경로
        readonly: 읽기 전용 여부 (조회 API용)

    사용 예시:
    ```python
    async with SQLiteAdapter(db_path) as db:
        async with db.transaction() as conn:
            await conn.execute("INSERT INTO ...")
    ```
    """

    def __init__(self, db_path: Path | str, readonly: bool = False):
        self.db_path = db_path if str(db_path) == ":memory:" else Path(db_path)
        self.readonly = readonly
        self._conn: aiosqlite.Connection | None = None

    @property
    def is_connected(self) -> bool:
        """연결 상태 확인"""
        return self._conn is not None

    async def connect(self) -> None:
        """연결 생성"""
        if self._conn is not None:
            return

        self._conn = await create_connection(self.db_path, self.readonly)

    async def close(self) -> None:
        """연결 종료"""
        if self._conn is not None:
            await self._conn.close()
            self._conn = None
            logger.debug("SQLite 연결 종료")

    async def execute(
        self,
        sql: str,
        parameters: tuple[Any, ...] | None = None,
    ) -> aiosqlite.Cursor:
        """SQL 실행"""
        if self._conn is None:
            raise RuntimeError("Not connected to database")

        if parameters:
            return await self._conn.execute(sql, parameters)
        return await self._conn.execute(sql)

    async def fetchone(
        self,
        sql: str,
        parameters: tuple[Any, ...] | None = None,
    ) -> tuple[Any, ...] | None:
        """단일 행 조회"""
        cursor = await self.execute(sql, parameters)
        return await cursor.fetchone()

    async def fetchall(
        self,
        sql: str,
        parameters: tuple[Any, ...] | None = None,
    ) -> list[tuple[Any, ...]]:
        """전체 행 조회"""
        cursor = await self.execute(sql, parameters)
        return list(await cursor.fetchall())

    async def commit(self) -> None:
        """커밋"""
        if self._conn is not None:
            await self._conn.commit()

    async def rollback(self) -> None:
        """롤백"""
        if self._conn is not None:
            await self._conn.rollback()

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[aiosqlite.Connection]:
        """트랜잭션 컨텍스트 매니저

        성공 시 자동 커밋, 예외 시 자동 롤백.
        """
        if self._conn is None:
            raise RuntimeError("Not connected to database")

        try:
            yield self._conn
            await self._conn.commit()
        except Exception:
            await self._conn.rollback()
            raise

    async def ping(self) -> bool:
        """연결 확인 (SELECT 1)"""
        row = await self.fetchone("SELECT 1")
        return row is not None and row[0] == 1

    async def table_exists(self, table_name: str) -> bool:
        """테이블 존재 여부 확인"""
        result = await self.fetchone(
            "SELECT name FROM sqlite_master WHERE type='table' AND name=?",
            (table_name,),
        )
        return result is not None

    async def count_rows(self, table_name: str) -> int:
        """테이블 행 수 조회

        Raises:
            ValueError: 스키마에 없는 테이블인 경우
        """
        if not await self.table_exists(table_name):
            raise ValueError(f"Unknown table: {table_name}")

        row = await self.fetchone(f"SELECT COUNT(*) FROM {table_name}")
        return int(row[0]) if row else 0

    # -------------------------------------------------------------------------
    # 컨텍스트 매니저
    # -------------------------------------------------------------------------

    async def __aenter__(self) -> "SQLiteAdapter":
        await self.connect()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()


async def init_schema(adapter: SQLiteAdapter) -> None:
    """스키마 초기화 (테이블 생성)

    Args:
        adapter: 연결된 SQLiteAdapter

    테이블:
        - clientes: 고객 등록 (RUT UNIQUE)
        - clients: 기존 고객 목록 테이블 (목록 조회 기본 대상)
        - balances: Balance General 스냅샷 (append-only)
    """
    # clientes (등록 API가 기록하는 테이블)
    await adapter.execute("""
        CREATE TABLE IF NOT EXISTS clientes (
            id           INTEGER PRIMARY KEY AUTOINCREMENT,
            rut          TEXT NOT NULL UNIQUE,
            nombre       TEXT NOT NULL,
            direccion    TEXT,
            telefono     TEXT,
            created_at   TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%f+00:00', 'now'))
        )
    """)

    # clients (목록 API가 조회하는 테이블)
    await adapter.execute("""
        CREATE TABLE IF NOT EXISTS clients (
            id           INTEGER PRIMARY KEY AUTOINCREMENT,
            rut          TEXT NOT NULL UNIQUE,
            name         TEXT NOT NULL,
            address      TEXT,
            phone        TEXT,
            created_at   TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%f+00:00', 'now'))
        )
    """)

    # balances
    await adapter.execute("""
        CREATE TABLE IF NOT EXISTS balances (
            id             INTEGER PRIMARY KEY AUTOINCREMENT,
            client_rut     TEXT NOT NULL,
            client_name    TEXT,
            accounts_json  TEXT NOT NULL,
            totals_json    TEXT NOT NULL,
            created_at     TEXT NOT NULL
        )
    """)

    # 인덱스 생성
    await adapter.execute("""
        CREATE INDEX IF NOT EXISTS ix_balances_client_rut
        ON balances(client_rut, created_at DESC)
    """)

    await adapter.execute("""
        CREATE INDEX IF NOT EXISTS ix_clientes_created_at
        ON clientes(created_at)
    """)

    await adapter.commit()

    logger.info("스키마 초기화 완료")
