"""
Unit tests for the shared page components (KPI cards, stylesheet).
"""

import contextlib
import re

from components import charts, styles
from components.charts import Kpi


class RecordingStreamlit:
    """Stands in for the streamlit module; keeps every markdown body."""

    def __init__(self):
        self.markdown_calls = []
        self.page_config = None

    def columns(self, n):
        return [contextlib.nullcontext() for _ in range(n)]

    def markdown(self, body, unsafe_allow_html=False):
        self.markdown_calls.append(body)

    def set_page_config(self, **kwargs):
        self.page_config = kwargs


class TestKpiRow:
    """Metric cards above the detail figures."""

    def test_one_card_per_kpi(self, monkeypatch):
        fake = RecordingStreamlit()
        monkeypatch.setattr(charts, "st", fake)

        charts.render_kpi_row([Kpi("Total sales", "4,512"), Kpi("Daily average", "150")])

        assert len(fake.markdown_calls) == 2
        assert "Total sales" in fake.markdown_calls[0]
        assert "4,512" in fake.markdown_calls[0]
        assert "Daily average" in fake.markdown_calls[1]

    def test_card_is_label_and_value_only(self, monkeypatch):
        fake = RecordingStreamlit()
        monkeypatch.setattr(charts, "st", fake)

        charts.render_kpi_row([Kpi("Max", "UV 9")])

        card = fake.markdown_calls[0]
        assert card.count('class="metric-') == 2
        assert "title=" not in card


class TestStylesheet:
    """Theme tokens are substituted into the injected CSS."""

    def test_all_tokens_substituted(self, monkeypatch):
        fake = RecordingStreamlit()
        monkeypatch.setattr(styles, "st", fake)

        styles.apply_theme()

        css = fake.markdown_calls[0]
        assert re.search(r"__[A-Z0-9_]+__", css) is None
        assert fake.page_config["page_title"] == styles.APP_TITLE

    def test_only_used_card_classes(self, monkeypatch):
        fake = RecordingStreamlit()
        monkeypatch.setattr(styles, "st", fake)

        styles.apply_theme()

        css = fake.markdown_calls[0]
        assert ".metric-card" in css
        assert ".metric-delta" not in css
        assert ".subtle" not in css
