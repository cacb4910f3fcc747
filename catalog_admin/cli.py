"""Command-line interface for Catalog Admin."""

from contextlib import contextmanager

import click
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

from .config import settings
from .database import Base, SessionLocal, engine, init_db
from .exceptions import CatalogError, PartialCascadeFailure
from .seed import seed_if_empty
from .services import BrandService, ProductService, ProductTypeService, RenameCoordinator
from .utils.formatting import format_price
from .utils.logger import logger


@contextmanager
def session_scope():
    """Open a session and turn catalog errors into a failed exit."""
    db = SessionLocal()
    try:
        yield db
    except PartialCascadeFailure as e:
        click.echo(f"⚠️  Partial rename: {e}", err=True)
        click.echo("   Products still carry the old name; rerun the rename or fix them by hand.", err=True)
        raise SystemExit(2)
    except CatalogError as e:
        click.echo(f"❌ Error: {e}", err=True)
        raise SystemExit(1)
    finally:
        db.close()


@click.group()
def cli():
    """Catalog Admin CLI."""
    pass


# Database commands
@cli.group()
def db():
    """Database management commands."""
    pass


@db.command()
def init():
    """Initialize the database (creates tables and seeds demo data if empty)."""
    click.echo("Initializing database...")
    init_db()
    click.echo("✅ Database initialized successfully!")


@db.command()
@click.confirmation_option(prompt="Are you sure you want to drop all tables?")
def reset():
    """Reset the database (drop and recreate all tables)."""
    import catalog_admin.models  # noqa: F401 - register all models with Base.metadata

    click.echo("Resetting database...")
    Base.metadata.drop_all(engine)
    Base.metadata.create_all(engine)
    logger.warning(f"Database reset: {settings.database_url}")
    click.echo("✅ Database reset successfully!")


@db.command()
def seed():
    """Insert demo brands, types and products into an empty database."""
    with session_scope() as session:
        if seed_if_empty(session):
            click.echo("✅ Demo catalog inserted")
        else:
            click.echo("Catalog already has data, nothing to do.")


# Product commands
@cli.group()
def product():
    """Product management commands."""
    pass


@product.command("list")
@click.option("--search", help="Filter by product, brand or type")
def list_products(search):
    """List products."""
    with session_scope() as session:
        products = ProductService().list_products(session, search=search)

        if not products:
            click.echo("No products found.")
            return

        click.echo(f"\nFound {len(products)} products:\n")
        for p in products:
            click.echo(f"ID: {p.id} | {p.name}")
            click.echo(
                f"   Brand: {p.brand_name} | Type: {p.type_name} | "
                f"MRP: {format_price(p.list_price)} | SP: {format_price(p.selling_price)} | "
                f"Qty: {p.quantity}"
            )


@product.command("add")
@click.option("--name", prompt=True, help="Product name without the brand")
@click.option("--brand", prompt=True, help="Existing brand")
@click.option("--type", "type_name", prompt=True, help="Existing product type")
@click.option("--mrp", prompt=True, help="List price")
@click.option("--sp", prompt=True, help="Selling price")
@click.option("--quantity", default=0, show_default=True, type=int)
@click.option("--image-url", help="Product image URL")
@click.option("--size", help="Size label")
def add_product(name, brand, type_name, mrp, sp, quantity, image_url, size):
    """Add a new product."""
    with session_scope() as session:
        product = ProductService().add_product(
            session,
            {
                "name": name,
                "brand_name": brand,
                "type_name": type_name,
                "list_price": mrp,
                "selling_price": sp,
                "quantity": quantity,
                "image_url": image_url,
                "size": size,
            },
        )
        click.echo(f"✅ Product added: {product.name} (ID: {product.id})")


@product.command("delete")
@click.argument("product_ids", nargs=-1, type=int, required=True)
def delete_products(product_ids):
    """Delete one or more products by id."""
    with session_scope() as session:
        deleted = ProductService().delete_products(session, product_ids)
        click.echo(f"✅ Deleted {deleted} of {len(set(product_ids))} product(s)")


@product.command("adjust-qty", context_settings={"ignore_unknown_options": True})
@click.argument("product_id", type=int)
@click.argument("delta", type=int)
def adjust_quantity(product_id, delta):
    """Change the stock of a product by DELTA (negative to remove)."""
    with session_scope() as session:
        product = ProductService().adjust_quantity(session, product_id, delta)
        click.echo(f"✅ {product.name}: quantity now {product.quantity}")


# Brand commands
@cli.group()
def brand():
    """Brand management commands."""
    pass


@brand.command("add")
@click.argument("name")
def add_brand(name):
    """Add a brand."""
    with session_scope() as session:
        created = BrandService().create_brand(session, name)
        click.echo(f"✅ Brand added: {created.name} (ID: {created.id})")


@brand.command("rename")
@click.argument("old_name")
@click.argument("new_name")
def rename_brand(old_name, new_name):
    """Rename a brand and update its products."""
    with session_scope() as session:
        result = RenameCoordinator().rename_brand(session, old_name, new_name)
        click.echo(
            f"✅ Brand renamed: {result.old_name} -> {result.new_name} "
            f"({result.products_updated} product(s) updated)"
        )


# Type commands
@cli.group("type")
def type_group():
    """Product type management commands."""
    pass


@type_group.command("add")
@click.argument("name")
def add_type(name):
    """Add a product type."""
    with session_scope() as session:
        created = ProductTypeService().create_type(session, name)
        click.echo(f"✅ Type added: {created.name} (ID: {created.id})")


@type_group.command("rename")
@click.argument("old_name")
@click.argument("new_name")
def rename_type(old_name, new_name):
    """Rename a product type and update its products."""
    with session_scope() as session:
        result = RenameCoordinator().rename_type(session, old_name, new_name)
        click.echo(
            f"✅ Type renamed: {result.old_name} -> {result.new_name} "
            f"({result.products_updated} product(s) updated)"
        )


if __name__ == "__main__":
    cli()
