"""Network access control CLI tool (netaccessctl)."""

import logging

import typer

from netaccess.core.config import settings
from netaccess.core.exceptions import NetAccessError

app = typer.Typer(name="netaccessctl", help=f"{settings.APP_NAME} CLI")
roles_app = typer.Typer(help="Role template commands")
groups_app = typer.Typer(help="User group commands")
app.add_typer(roles_app, name="roles")
app.add_typer(groups_app, name="groups")


@app.callback()
def main():
    """Configure logging for every command."""
    logging.basicConfig(
        level=logging.DEBUG if settings.DEBUG else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def _services():
    from netaccess.db.session import get_store
    from netaccess.services.group_service import GroupService
    from netaccess.services.role_service import RoleService
    from netaccess.services.user_directory import RecordUserDirectory

    store = get_store()
    users = RecordUserDirectory(store)
    groups = GroupService(store, users)
    return RoleService(store, users, groups), groups


def _fail(e: NetAccessError):
    typer.echo(f"Error: {e.message}", err=True)
    raise typer.Exit(code=1)


@roles_app.command("bootstrap")
def roles_bootstrap():
    """Seed the four default roles."""
    from netaccess.bootstrap import bootstrap_gate

    roles, _ = _services()
    try:
        bootstrap_gate.run(roles)
    except NetAccessError as e:
        _fail(e)
    typer.echo("Default roles seeded")


@roles_app.command("list")
def roles_list():
    """List stored role templates."""
    roles, _ = _services()
    try:
        templates = roles.list()
    except NetAccessError as e:
        _fail(e)
    for t in sorted(templates, key=lambda t: t.id):
        flags = [name for name, on in (
            ("default", t.default),
            ("full-access", t.full_access),
            ("network", t.is_network_role),
            ("no-dashboard", t.deny_dashboard_access),
        ) if on]
        typer.echo(f"  {t.id} [{', '.join(flags)}]")


@roles_app.command("show")
def roles_show(role_id: str = typer.Argument(..., help="Role ID")):
    """Print a role template as JSON."""
    roles, _ = _services()
    try:
        template = roles.get(role_id)
    except NetAccessError as e:
        _fail(e)
    typer.echo(template.model_dump_json(indent=2))


@roles_app.command("delete")
def roles_delete(role_id: str = typer.Argument(..., help="Role ID")):
    """Delete a role no user or group references."""
    roles, _ = _services()
    try:
        roles.delete(role_id)
    except NetAccessError as e:
        _fail(e)
    typer.echo(f"Deleted role {role_id}")


@groups_app.command("list")
def groups_list():
    """List stored user groups."""
    _, groups = _services()
    try:
        stored = groups.list()
    except NetAccessError as e:
        _fail(e)
    for g in sorted(stored, key=lambda g: g.id):
        typer.echo(f"  {g.id}: {', '.join(sorted(g.role_ids())) or '-'}")


@groups_app.command("delete")
def groups_delete(group_id: str = typer.Argument(..., help="Group ID")):
    """Delete a group and remove it from every member."""
    _, groups = _services()
    try:
        report = groups.delete(group_id)
    except NetAccessError as e:
        _fail(e)
    typer.echo(f"Deleted group {group_id}; updated {len(report.updated_users)} users")
    if not report.complete:
        typer.echo(f"Failed to update: {', '.join(report.failed_users)}", err=True)
        raise typer.Exit(code=1)


@app.command("check")
def check(
    role_id: str = typer.Argument(..., help="Role ID"),
    network_id: str = typer.Argument(..., help="Network ID"),
    resource_type: str = typer.Argument(..., help="Resource type"),
    resource_id: str = typer.Argument(..., help="Resource ID"),
    operation: str = typer.Argument(..., help="Operation, e.g. read or PUT"),
    strict: bool = typer.Option(False, help="Check the operation against the resource scope"),
):
    """Evaluate a role against a resource."""
    from netaccess.services.access import has_network_resource_scope

    roles, _ = _services()
    try:
        template = roles.get(role_id)
    except NetAccessError as e:
        _fail(e)
    allowed = has_network_resource_scope(
        template, network_id, resource_type, resource_id, operation,
        enforce_operation_scope=strict or None,
    )
    typer.echo("allowed" if allowed else "denied")
    if not allowed:
        raise typer.Exit(code=2)


if __name__ == "__main__":
    app()
