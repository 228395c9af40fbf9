# scripts/manage.py

"""
bizdesk 관리용 CLI 입니다.

    python -m scripts.manage init-db
    python -m scripts.manage create-user -e owner@example.com -n "Owner" --company "Acme B.V."
"""

import asyncio
from typing import Optional

import typer
from fastapi import HTTPException
from pydantic import ValidationError

from bizdesk.core.database import create_db_and_tables, engine, get_async_session_context
from bizdesk.domains.corp import crud as corp_crud
from bizdesk.domains.usr import crud as usr_crud
from bizdesk.domains.usr import schemas as usr_schemas

cli = typer.Typer(help="bizdesk 관리 명령")


@cli.command("init-db")
def init_db():
    """
    모든 테이블을 생성합니다. (개발용, 운영 DB는 Alembic 마이그레이션을 사용하세요.)
    """
    async def run():
        await create_db_and_tables()
        await engine.dispose()

    asyncio.run(run())
    typer.echo("테이블 생성이 완료되었습니다.")


async def create_user(user_in: usr_schemas.UserCreate, company_name: Optional[str]) -> None:
    async with get_async_session_context() as db:
        db_user = await usr_crud.user.create(db, obj_in=user_in)
        if company_name:
            await corp_crud.company.create_for_user(db, user=db_user, data={"name": company_name})
    await engine.dispose()


@cli.command("create-user")
def create_user_command(
    email: str = typer.Option(
        ..., '--email', '-e',
        prompt="사용자 이메일을 입력하세요",
        help="로그인에 사용할 이메일 주소입니다."
    ),
    password: str = typer.Option(
        ..., '--password', '-p',
        prompt="비밀번호를 입력하세요",
        hide_input=True,
        confirmation_prompt=True,
        help="비밀번호입니다. (최소 8자 이상)"
    ),
    name: Optional[str] = typer.Option(None, '--name', '-n', help="표시 이름입니다."),
    company_name: Optional[str] = typer.Option(
        None, '--company', '-c',
        help="지정하면 회사 프로필을 함께 생성하여 사용자에게 연결합니다."
    ),
):
    """
    새 사용자를 생성합니다.
    """
    try:
        user_in = usr_schemas.UserCreate(email=email, password=password, name=name)
    except ValidationError as e:
        typer.echo(f"오류: 입력값이 올바르지 않습니다.\n{e}", err=True)
        raise typer.Exit(code=1)

    try:
        asyncio.run(create_user(user_in, company_name))
    except HTTPException as e:
        typer.echo(f"오류: {e.detail}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"사용자 계정이 생성되었습니다: {email}")


if __name__ == "__main__":
    cli()
