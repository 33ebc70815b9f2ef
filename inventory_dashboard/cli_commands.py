"""
Flask CLI commands for managing the record collections.

Commands:
- flask seed-data: Write the mock data to every collection
- flask reset-collection NAME: Forget a collection so it is seeded again
"""

import click

from inventory_dashboard.exceptions import StorageError
from inventory_dashboard.record_store import get_registry
from inventory_dashboard.seed_data import SEED_FACTORIES


def init_cli_commands(app):
    """Register CLI commands with Flask app."""

    @app.cli.command('seed-data')
    @click.option('--force', is_flag=True, help='Overwrite collections that already hold data')
    def seed_data(force):
        """Write the mock data set to the record stores."""
        registry = get_registry()

        for name, factory in SEED_FACTORIES.items():
            store = registry.get(name)
            try:
                if store.exists() and not force:
                    click.echo(f'   {name}: already present, skipped')
                    continue
                records = factory()
                store.save(records)
            except StorageError as e:
                click.echo(click.style(f'❌ {e.message}', fg='red'))
                raise SystemExit(1)
            click.echo(f'   {name}: {len(records)} records')

        click.echo(click.style(f'\n✅ Seed data written ({registry.backend} backend)', fg='green', bold=True))

    @app.cli.command('reset-collection')
    @click.argument('name')
    def reset_collection(name):
        """Delete a collection; seeded collections come back on next load."""
        registry = get_registry()
        try:
            registry.get(name).clear()
        except (OSError, StorageError) as e:
            click.echo(click.style(f'❌ Could not reset {name}: {e}', fg='red'))
            raise SystemExit(1)

        if name in SEED_FACTORIES:
            click.echo(click.style(f'✅ {name} reset; it will be seeded on next load', fg='green'))
        else:
            click.echo(click.style(f'✅ {name} reset', fg='green'))
