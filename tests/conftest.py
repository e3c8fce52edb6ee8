import pytest

from orb_billing.config import get_settings


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    monkeypatch.delenv("ORB_API_KEY", raising=False)
    monkeypatch.delenv("ORB_BASE_URL", raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def subscription_body():
    return {
        "id": "sub_123",
        "status": "active",
        "start_date": "2024-01-01T00:00:00Z",
        "end_date": None,
        "customer": {"id": "cus_1"},
        "price_intervals": [
            {
                "id": "pi_1",
                "start_date": "2024-01-01T00:00:00Z",
                "end_date": None,
                "billing_cycle_day": 1,
                "price": {"id": "price_1", "external_price_id": "seat", "model_type": "unit"},
            }
        ],
        "adjustment_intervals": [
            {
                "id": "ai_1",
                "start_date": "2024-02-01T00:00:00Z",
                "end_date": None,
                "applies_to_price_interval_ids": ["pi_1"],
                "adjustment": {"adjustment_type": "percentage_discount", "percentage_discount": 0.1},
            }
        ],
    }
