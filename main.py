"""
main.py
-------
Entry point for the catalog demo.

Responsibilities:
    - Build the product and category mappers from DB_CONFIG.
    - Walk through the catalog scenarios: list, filter, update, delete, insert.
    - Close the gateway connections on the way out.
"""

from config import DB_CONFIG
from db.table_gateway import CategoryTable, ProductTable
from repositories.mapper import Mapper
from services.catalog_service import CatalogService
from utils.logger import get_logger

logger = get_logger(__name__)


def run_demo(service: CatalogService) -> None:
    """Run the four catalog scenarios in order, printing each result."""
    print("1. List all products in table")
    print(service.format_products(service.list_products()))

    print("2. List all products in the 'vegetable' category")
    print(service.format_products(service.list_products_in_category("vegetable")))

    print("3. Update the product 'apple' and set its price to 0.24")
    old, new = service.set_price("apple", 0.24)
    print(f'  Product "apple" used to cost "{old}"')
    print(f'  Product "apple" costs now "{new}"')
    service.set_price("apple", 0.15)

    print("4. Remove product 'pineapple' from the product table")
    service.remove_product("pineapple")
    print(service.format_products(service.list_products()))
    service.add_product("pineapple", 1, 0.95)


def main() -> None:
    product_table = ProductTable(DB_CONFIG)
    category_table = CategoryTable(DB_CONFIG)
    service = CatalogService(Mapper(product_table), Mapper(category_table))

    logger.info("🛒 Running catalog demo...")
    try:
        run_demo(service)
    finally:
        product_table.close()
        category_table.close()


if __name__ == "__main__":
    main()
