import click

from catalog.infrastructure.bootstrap import products_controller
from catalog.infrastructure.cli._runner import run
from catalog.infrastructure.cli.product_commands import (
    product_create,
    product_delete,
    product_list,
    product_show,
    product_update,
    product_validate,
)
from catalog.infrastructure.config import get_settings
from catalog.infrastructure.logging_config import configure_logging
from catalog.infrastructure.messaging.server import MessageServer


@click.group()
def cli() -> None:
    """Product catalog service"""
    configure_logging(get_settings())


@cli.group()
def product() -> None:
    """Manage products."""


@cli.command("serve")
def serve() -> None:
    """Answer JSON request messages read line by line from stdin."""
    server = MessageServer(products_controller())
    run(server.serve())


# Register subcommands
product.add_command(product_create)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_update)
product.add_command(product_validate)
