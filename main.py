import json
import sys
from typing import Any, Dict, Tuple

import click

from config import USERS_URL, logger
from errors import InvalidArgumentError, UserDataError
from http_client import RequestsJsonClient
from user_data_accessor import UserDataAccessor


def parse_search_params(pairs: Tuple[str, ...]) -> Dict[str, Any]:
    """Turn ``key=value`` pairs into search params, reading values as JSON when they parse."""
    params: Dict[str, Any] = {}
    for pair in pairs:
        key, sep, raw = pair.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected KEY=VALUE, got {pair!r}", param_hint="PARAMS")
        try:
            params[key] = json.loads(raw)
        except ValueError:
            params[key] = raw
    return params


def _loaded_accessor(ctx: click.Context) -> UserDataAccessor:
    accessor: UserDataAccessor = ctx.obj
    logger.info("Loading users from %s", accessor.users_url)
    accessor.load_users()
    return accessor


def _fail(error: UserDataError) -> None:
    click.echo(error.message, err=True)
    sys.exit(1)


@click.group()
@click.option("--url", default=USERS_URL, show_default=True, help="Users endpoint to load from")
@click.pass_context
def cli(ctx: click.Context, url: str) -> None:
    """Query the user records served by a users endpoint."""
    if ctx.obj is None:
        client = RequestsJsonClient()
        ctx.call_on_close(client.close)
        ctx.obj = UserDataAccessor(client=client, users_url=url)


@cli.command()
@click.pass_context
def count(ctx: click.Context) -> None:
    """Print the number of loaded users."""
    try:
        click.echo(_loaded_accessor(ctx).get_number_of_users())
    except UserDataError as error:
        _fail(error)


@cli.command()
@click.pass_context
def emails(ctx: click.Context) -> None:
    """Print every user email joined by ';'."""
    try:
        click.echo(_loaded_accessor(ctx).get_user_emails_list())
    except UserDataError as error:
        _fail(error)


@cli.command()
@click.argument("params", nargs=-1)
@click.pass_context
def find(ctx: click.Context, params: Tuple[str, ...]) -> None:
    """Print users matching every KEY=VALUE pair, as JSON.

    Values are read as JSON literals where possible, so ``id=1`` matches the
    number 1 and ``username=Bret`` matches the string.
    """
    search_params = parse_search_params(params)
    try:
        if not search_params:
            raise InvalidArgumentError()
        accessor = _loaded_accessor(ctx)
        users = accessor.find_users(search_params)
    except UserDataError as error:
        _fail(error)
        return
    click.echo(json.dumps([user.to_dict() for user in users], indent=2))


if __name__ == "__main__":
    cli()
