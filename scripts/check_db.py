#!/usr/bin/env python3
"""DB 상태 확인 스크립트

연결 여부와 테이블별 레코드 수 출력.
--write-test 옵션 시 테스트 고객 등록 후 삭제.
"""

import argparse
import asyncio
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from adapters.db.sqlite_adapter import SQLiteAdapter, init_schema
from core.config.loader import get_settings
from core.storage.client_store import ClientStore

TEST_RUT = "11.111.111-1"


async def main(db_path: Path, write_test: bool) -> int:
    print(f"DB Path: {db_path}")

    try:
        async with SQLiteAdapter(db_path) as db:
            await db.ping()
            print("Database connected")

            await init_schema(db)

            for table in ("clientes", "clients", "balances"):
                try:
                    count = await db.count_rows(table)
                    print(f"  {table}: {count} records")
                except Exception as e:
                    print(f"  {table}: error ({e})")

            if write_test:
                store = ClientStore(db)
                client = await store.register(TEST_RUT, "Test Debug Client", "Test Address")
                print(f"Test client created: {client.rut} (id={client.id})")

                async with db.transaction() as conn:
                    await conn.execute("DELETE FROM clientes WHERE rut = ?", (TEST_RUT,))
                print("Test client cleaned up")
    except Exception as e:
        print(f"Database check failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="DB 상태 확인")
    parser.add_argument("--db", type=Path, default=None, help="DB 파일 경로 (기본: 설정값)")
    parser.add_argument("--write-test", action="store_true", help="테스트 고객 등록/삭제")
    args = parser.parse_args()

    sys.exit(asyncio.run(main(args.db or get_settings().db_path, args.write_test)))
