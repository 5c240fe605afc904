"""Unit tests for the Product aggregate."""

from datetime import date

from warehouse.domain.model.product import Product


class TestProduct:

    def test_new_product_has_no_id(self):
        assert Product(name="Milk", expiry_date=date(2025, 6, 1)).id is None

    def test_revise_overwrites_fields_in_place(self):
        product = Product(id=3, name="Milk", expiry_date=date(2025, 6, 1))
        product.revise("Oat Milk", date(2025, 7, 1))
        assert product == Product(id=3, name="Oat Milk", expiry_date=date(2025, 7, 1))
