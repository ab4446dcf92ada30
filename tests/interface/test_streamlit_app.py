"""Tests for the Streamlit app module."""

from decimal import Decimal
from unittest.mock import MagicMock

from src.adapters.interface.streamlit import app
from src.domain.models.ledger import MonthlySummary
from src.domain.services.comparison import build_comparison


def _comparison():
    return build_comparison(
        {
            "2023-24": [
                MonthlySummary(
                    month="2023-10",
                    net_income=Decimal("100"),
                    wages=Decimal("30"),
                    profit=Decimal("70"),
                )
            ],
            "2024-25": [
                MonthlySummary(
                    month="2024-10",
                    net_income=Decimal("120"),
                    wages=Decimal("30"),
                    fixed_costs=Decimal("10"),
                    profit=Decimal("80"),
                ),
                MonthlySummary(
                    month="2025-09",
                    net_income=Decimal("50"),
                    profit=Decimal("50"),
                ),
            ],
        }
    )


def test_fetch_fiscal_years_invokes_use_case(monkeypatch):
    """_fetch_fiscal_years should build and execute the list use case."""
    use_case = MagicMock()
    use_case.execute.return_value = ["2024-25"]
    monkeypatch.setattr(app, "build_list_fiscal_years_use_case", lambda: use_case)

    assert app._fetch_fiscal_years() == ["2024-25"]


def test_load_fiscal_years_uses_fetch(monkeypatch):
    """The cached loader should delegate to _fetch_fiscal_years."""
    monkeypatch.setattr(app, "_fetch_fiscal_years", lambda: ["cached"])

    assert app._load_fiscal_years() == ["cached"]


def test_fetch_comparison_passes_years(monkeypatch):
    use_case = MagicMock()
    use_case.execute.return_value = "result"
    monkeypatch.setattr(app, "build_compare_years_use_case", lambda: use_case)

    assert app._fetch_comparison(("2023-24", "2024-25")) == "result"
    use_case.execute.assert_called_once_with(["2023-24", "2024-25"])


def test_format_helpers():
    assert app._format_currency(Decimal("1234.5")) == "£1,234.50"
    assert app._format_currency(Decimal("-3")) == "-£3.00"
    assert app._format_change(None) is None
    assert app._format_change(Decimal("20")) == "+20.0%"
    assert app._format_change(Decimal("-2.25")) == "-2.2%"


def test_month_table_rows_start_in_october():
    rows = app._month_table_rows(_comparison(), "2024-25")

    assert len(rows) == 12
    assert rows[0]["Month"] == "Oct"
    assert rows[0]["Costs"] == "£40.00"
    assert rows[0]["Profit"] == "£80.00"
    assert rows[11]["Month"] == "Sep"
    assert rows[11]["Net income"] == "£50.00"
    assert rows[5]["Profit"] == "£0.00"


def test_prepare_trend_chart_data_flattens_rows():
    data = app._prepare_trend_chart_data(_comparison())

    assert len(data) == 12 * 2 * 2
    first = data[0]
    assert first == {
        "position": 1,
        "month": "Oct",
        "fiscal_year": "2023-24",
        "metric": "Net income",
        "amount": 100.0,
    }


def test_render_trend_chart_warns_when_libraries_broken(monkeypatch):
    fake_st = _FakeStreamlit()
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(
        app,
        "_check_altair_dependencies",
        lambda: (False, "numpy is installed incorrectly"),
    )

    app._render_trend_chart(_comparison())

    assert fake_st.warnings == ["numpy is installed incorrectly"]
    assert fake_st.charts == []


class _FakeColumn:
    def __init__(self, sink: list) -> None:
        self._sink = sink

    def metric(self, label, value, delta=None, **kwargs):
        self._sink.append((label, value, delta))


class _FakeSidebar:
    def __init__(self, selection=None) -> None:
        self.selection = selection
        self.multiselect_kwargs = None

    def multiselect(self, label, **kwargs):
        self.multiselect_kwargs = kwargs
        if self.selection is None:
            return kwargs["default"]
        return self.selection


class _FakeStreamlit:
    def __init__(self, selection=None) -> None:
        self.sidebar = _FakeSidebar(selection)
        self.warnings: list[str] = []
        self.infos: list[str] = []
        self.metrics: list[tuple] = []
        self.subheaders: list[str] = []
        self.captions: list[str] = []
        self.dataframes: list = []
        self.charts: list = []
        self.title_text = None

    def set_page_config(self, **kwargs):
        self.config_kwargs = kwargs

    def title(self, text: str):
        self.title_text = text

    def warning(self, text: str):
        self.warnings.append(text)

    def info(self, text: str):
        self.infos.append(text)

    def columns(self, count: int):
        return [_FakeColumn(self.metrics) for _ in range(count)]

    def subheader(self, text: str):
        self.subheaders.append(text)

    def caption(self, text: str):
        self.captions.append(text)

    def dataframe(self, data, **kwargs):
        self.dataframes.append((data, kwargs))

    def altair_chart(self, chart, **kwargs):
        self.charts.append(chart)


def _patch_main(monkeypatch, fake_st, fiscal_years):
    loaded = []

    def fake_load_comparison(years, schema_version=1):
        loaded.append(years)
        return _comparison()

    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_load_fiscal_years", lambda: fiscal_years)
    monkeypatch.setattr(app, "_load_comparison", fake_load_comparison)
    monkeypatch.setattr(app, "_check_altair_dependencies", lambda: (False, "off"))
    monkeypatch.setattr(app, "get_usage_logger", lambda: MagicMock())
    return loaded


def test_main_warns_without_fiscal_years(monkeypatch):
    fake_st = _FakeStreamlit()
    loaded = _patch_main(monkeypatch, fake_st, [])

    app.main()

    assert fake_st.title_text == "Year on Year"
    assert fake_st.warnings == ["No fiscal years found. Enter ledger data first."]
    assert loaded == []


def test_main_asks_for_a_selection(monkeypatch):
    fake_st = _FakeStreamlit(selection=[])
    loaded = _patch_main(monkeypatch, fake_st, ["2024-25"])

    app.main()

    assert fake_st.infos == ["Select at least one fiscal year."]
    assert loaded == []


def test_main_renders_latest_two_years(monkeypatch):
    fake_st = _FakeStreamlit()
    loaded = _patch_main(monkeypatch, fake_st, ["2024-25", "2023-24", "2022-23"])

    app.main()

    assert fake_st.sidebar.multiselect_kwargs["default"] == ["2024-25", "2023-24"]
    assert loaded == [("2023-24", "2024-25")]
    assert fake_st.metrics == [
        ("Net income", "£170.00", "+70.0%"),
        ("Costs", "£40.00", "+33.3%"),
        ("Profit", "£130.00", "+85.7%"),
    ]
    assert len(fake_st.dataframes) == 2
    assert fake_st.captions
    assert fake_st.subheaders[-2:] == ["2024-2025", "2023-2024"]
