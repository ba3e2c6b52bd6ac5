"""Unit tests for domain value objects."""

import uuid
from decimal import Decimal

import pytest

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.value_objects import Currency, Price, ProductId, Stock


# ── Currency ─────────────────────────────────────────────────────────────────


class TestCurrency:

    def test_from_known_code(self):
        assert Currency.from_code("TRY").unwrap() is Currency.TRY

    def test_from_code_ignores_case_and_whitespace(self):
        assert Currency.from_code(" usd ").unwrap() is Currency.USD

    def test_unknown_code_fails(self):
        result = Currency.from_code("XYZ")
        assert result.is_failure
        assert "Unknown currency code" in str(result.error)

    def test_non_string_code_fails(self):
        assert Currency.from_code(None).is_failure

    def test_code_property(self):
        assert Currency.EUR.code == "EUR"


# ── Price ────────────────────────────────────────────────────────────────────


class TestPrice:

    def test_creation(self):
        p = Price(Decimal("15000.00"), Currency.TRY)
        assert p.amount == Decimal("15000.00")
        assert p.currency is Currency.TRY

    def test_zero_is_allowed(self):
        assert Price(Decimal("0"), Currency.USD).amount == Decimal("0")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Price(Decimal("-0.01"), Currency.TRY)

    def test_float_amount_rejected_by_constructor(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Price(10.5, Currency.TRY)

    def test_nan_rejected(self):
        with pytest.raises(ValidationError, match="finite"):
            Price(Decimal("NaN"), Currency.TRY)

    def test_currency_must_be_enum(self):
        with pytest.raises(ValidationError, match="must be a Currency"):
            Price(Decimal("1"), "TRY")

    @pytest.mark.parametrize("amount", ["0", "0.01", "100", 250, "15000.00", Decimal("99.99")])
    def test_of_accepts_valid_amounts(self, amount):
        result = Price.of(amount, Currency.TRY)
        assert result.is_success
        assert result.value.amount == Decimal(str(amount))

    @pytest.mark.parametrize("amount", ["-1", -5, "-0.01"])
    def test_of_rejects_negative_amounts(self, amount):
        result = Price.of(amount, Currency.TRY)
        assert result.is_failure
        assert "cannot be negative" in str(result.error)

    @pytest.mark.parametrize("amount", ["1.005", "0.001", Decimal("19.999")])
    def test_of_rejects_sub_cent_amounts(self, amount):
        result = Price.of(amount, Currency.TRY)
        assert result.is_failure
        assert "more than 2 decimal places" in str(result.error)

    def test_trailing_zeros_beyond_cents_are_fine(self):
        assert Price.of("1.500", Currency.TRY).unwrap() == Price.of("1.50", Currency.TRY).unwrap()

    def test_largest_amount_accepted(self):
        assert Price.of("99999999999999999.99", Currency.TRY).is_success

    @pytest.mark.parametrize("amount", ["100000000000000000", "1E+30"])
    def test_of_rejects_amounts_too_large(self, amount):
        result = Price.of(amount, Currency.TRY)
        assert result.is_failure
        assert "exceeds" in str(result.error)

    def test_constructor_rejects_sub_cent_amount(self):
        with pytest.raises(ValidationError, match="decimal places"):
            Price(Decimal("1.005"), Currency.TRY)

    def test_of_rejects_garbage(self):
        result = Price.of("abc", Currency.TRY)
        assert result.is_failure
        assert "Invalid price amount" in str(result.error)

    def test_of_resolves_currency_code(self):
        assert Price.of("10", "eur").unwrap().currency is Currency.EUR

    def test_of_rejects_unknown_currency(self):
        assert Price.of("10", "ABC").is_failure

    def test_of_keeps_decimal_precision(self):
        assert Price.of(0.1, Currency.USD).unwrap().amount == Decimal("0.1")

    def test_structural_equality(self):
        assert Price.of("10.00", "TRY").unwrap() == Price.of("10.00", "TRY").unwrap()
        assert Price.of("10.00", "TRY").unwrap() != Price.of("10.00", "USD").unwrap()

    def test_immutable(self):
        p = Price.of("10", "TRY").unwrap()
        with pytest.raises(AttributeError):
            p.amount = Decimal("20")

    def test_str_formatting(self):
        assert str(Price.of("15000", "TRY").unwrap()) == "15000.00 TRY"
        assert str(Price.of("9.5", "USD").unwrap()) == "9.50 USD"


# ── Stock ────────────────────────────────────────────────────────────────────


class TestStock:

    def test_valid_stock(self):
        assert Stock(5).quantity == 5

    def test_zero_allowed(self):
        assert Stock(0).quantity == 0

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Stock(-1)

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Stock(True)

    def test_of_returns_failure_instead_of_raising(self):
        result = Stock.of(-3)
        assert result.is_failure
        with pytest.raises(ValidationError):
            result.unwrap()

    def test_str(self):
        assert str(Stock(7)) == "7"


# ── ProductId ────────────────────────────────────────────────────────────────


class TestProductId:

    def test_generate_is_unique(self):
        assert ProductId.generate() != ProductId.generate()

    def test_parse_string(self):
        raw = "3f1c5c9e-7c1a-4f6e-9a53-2f7c9b1d0e11"
        pid = ProductId.parse(raw).unwrap()
        assert pid.value == uuid.UUID(raw)
        assert str(pid) == raw

    def test_parse_uuid_and_product_id(self):
        value = uuid.uuid4()
        assert ProductId.parse(value).unwrap() == ProductId(value)
        assert ProductId.parse(ProductId(value)).unwrap() == ProductId(value)

    def test_parse_garbage_fails(self):
        result = ProductId.parse("not-a-uuid")
        assert result.is_failure
        assert "Invalid product id" in str(result.error)

    def test_must_wrap_uuid(self):
        with pytest.raises(ValidationError):
            ProductId("3f1c5c9e-7c1a-4f6e-9a53-2f7c9b1d0e11")
