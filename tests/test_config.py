import pytest
from pydantic import ValidationError

from app.core import config
from app.core.config import BaseAppSettings, ProdSettings, SellablePolicy


def test_defaults():
    cfg = BaseAppSettings(_env_file=None)

    assert cfg.INVENTORY_PAGE_SIZE == 100
    assert cfg.INVENTORY_MAX_PAGES == 20
    assert cfg.LOCATIONS_PAGE_SIZE == 50
    assert cfg.LOCATIONS_MAX_PAGES == 100
    assert cfg.PAGE_DELAY_SECONDS == 0.3
    assert cfg.SLOTTED_SELLABLE_POLICY is SellablePolicy.ALWAYS


def test_test_settings_do_not_wait_between_pages():
    assert config.TestSettings(_env_file=None).PAGE_DELAY_SECONDS == 0.0


def test_policy_from_string():
    cfg = BaseAppSettings(_env_file=None, SLOTTED_SELLABLE_POLICY="pickable")

    assert cfg.SLOTTED_SELLABLE_POLICY is SellablePolicy.PICKABLE


@pytest.mark.parametrize(
    "field, value",
    [
        ("INVENTORY_PAGE_SIZE", 0),
        ("INVENTORY_PAGE_SIZE", 101),
        ("LOCATIONS_PAGE_SIZE", -5),
        ("INVENTORY_MAX_PAGES", 0),
        ("LOCATIONS_MAX_PAGES", 0),
        ("PAGE_DELAY_SECONDS", -0.1),
    ],
)
def test_invalid_tuning_is_rejected(field, value):
    with pytest.raises(ValidationError):
        BaseAppSettings(_env_file=None, **{field: value})


def test_customer_accounts_keys_are_ints():
    cfg = BaseAppSettings(_env_file=None, CUSTOMER_ACCOUNTS={"88774": "Acme"})

    assert cfg.CUSTOMER_ACCOUNTS == {88774: "Acme"}


def test_prod_settings_defaults_are_valid():
    cfg = ProdSettings(_env_file=None)

    assert cfg.LOG_FORMAT == "json"
    assert "*" not in cfg.CORS_ALLOW_ORIGINS


@pytest.mark.parametrize(
    "overrides, fragment",
    [
        ({"SHIPHERO_GRAPHQL_URL": "http://public-api.shiphero.com/graphql"}, "https"),
        ({"CORS_ALLOW_ORIGINS": ["*"]}, "wildcard"),
    ],
)
def test_prod_rejects_unsafe_settings(overrides, fragment):
    with pytest.raises(ValidationError) as exc_info:
        ProdSettings(_env_file=None, **overrides)

    assert fragment in str(exc_info.value)
