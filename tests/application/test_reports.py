"""Tests for the report runner."""

import pytest

from shopstats.application.codes import CodeRegistry
from shopstats.application.reports import REPORT_TITLES, ReportRunner
from shopstats.core.domain import ShopData, create_order
from shopstats.core.domain.events import (
    DomainEvent,
    EventBus,
    ReportFailed,
    ReportGenerated,
    ReportsCompleted,
    ReportsStarted,
)
from shopstats.core.exceptions import ConfigError, NoDataError
from shopstats.core.ports.config_provider import REPORT_NAMES, ReportConfig


class TestReportRunner:
    """Tests for ReportRunner over the demo data."""

    @pytest.fixture
    def runner(self, demo):
        return ReportRunner(demo)

    def test_runs_all_reports_in_order(self, runner):
        run = runner.run()

        assert run.names == list(REPORT_NAMES)

    def test_titles(self, runner):
        run = runner.run()

        assert all(result.title == REPORT_TITLES[result.name] for result in run.results)

    def test_values(self, runner, demo):
        run = runner.run()

        assert run.get("codes").value == {"xxx": True, "yyy": False}
        assert run.get("most-expensive").value.name == "Product C"
        assert run.get("most-popular").value.name == "Product A"
        assert run.get("average-age").value == 23.0
        assert run.get("average-age").params == {"product": "Product B"}
        assert len(run.get("product-users").value) == 4
        assert run.get("order-weights").value[demo.orders[0]] == 25

    def test_get_missing(self, runner):
        assert runner.run().get("nothing") is None

    def test_selection_runs_in_fixed_order(self, demo):
        config = ReportConfig(reports=["order-weights", "most-expensive"])

        run = ReportRunner(demo, config).run()

        assert run.names == ["most-expensive", "order-weights"]

    def test_unknown_report(self, demo):
        with pytest.raises(ConfigError) as exc_info:
            ReportRunner(demo, ReportConfig(reports=["best-sellers"]))

        assert exc_info.value.errors == ["best-sellers"]

    def test_unknown_average_age_product(self, demo):
        config = ReportConfig(reports=["average-age"], average_age_product="Product Z")

        with pytest.raises(ConfigError):
            ReportRunner(demo, config).run()

    def test_uses_given_registry(self, demo):
        registry = CodeRegistry()
        config = ReportConfig(reports=["codes"], codes_to_mark=["abc"], codes_to_check=["abc", "xxx"])

        run = ReportRunner(demo, config, registry=registry).run()

        assert registry.is_used("abc")
        assert run.get("codes").value == {"abc": True, "xxx": False}

    def test_registry_is_the_one_marked(self, demo):
        mine = CodeRegistry()
        runner = ReportRunner(demo, ReportConfig(reports=["codes"]), registry=mine)

        runner.run()

        assert runner.registry is mine
        assert mine.is_used("xxx")
        assert mine.used_codes == frozenset({"xxx"})


@pytest.fixture
def event_log():
    """An event bus together with the list of events it delivered."""
    bus = EventBus()
    events = []
    bus.subscribe(DomainEvent, events.append)
    return bus, events


class TestReportRunnerErrors:
    """Tests for failing reports."""

    @pytest.fixture
    def empty_shop(self, alice, product_a):
        return ShopData(
            users=[alice],
            products=[product_a],
            orders=[create_order(alice, [])],
        )

    def test_no_data_propagates(self, empty_shop):
        runner = ReportRunner(empty_shop, ReportConfig(reports=["most-expensive"]))

        with pytest.raises(NoDataError):
            runner.run()

    def test_failure_publishes_event(self, empty_shop, event_log):
        bus, events = event_log
        runner = ReportRunner(
            empty_shop,
            ReportConfig(reports=["most-popular"]),
            event_bus=bus,
        )

        with pytest.raises(NoDataError):
            runner.run()

        failed = [e for e in events if isinstance(e, ReportFailed)]
        assert len(failed) == 1
        assert failed[0].report_name == "most-popular"
        assert not any(isinstance(e, ReportsCompleted) for e in events)


class TestReportRunnerEvents:
    """Tests for events published during a run."""

    def test_event_sequence(self, demo, event_log):
        bus, events = event_log
        ReportRunner(demo, ReportConfig(reports=["codes", "most-popular"]), event_bus=bus).run()

        types = [type(event) for event in events]

        assert types[0] is ReportsStarted
        assert types[-1] is ReportsCompleted
        assert types.count(ReportGenerated) == 2
        assert events[-1].reports_generated == 2

    def test_registry_shares_event_bus(self, demo, event_log):
        bus, events = event_log
        ReportRunner(demo, ReportConfig(reports=["codes"]), event_bus=bus).run()

        assert "CodeMarkedUsed" in [event.event_type for event in events]

    def test_empty_collaborators_are_kept(self, demo):
        registry = CodeRegistry()
        bus = EventBus()
        config = ReportConfig(reports=[])

        runner = ReportRunner(demo, config, registry=registry, event_bus=bus)

        assert runner.registry is registry
        assert runner.event_bus is bus
        assert runner.config is config
        assert runner.run().results == []
