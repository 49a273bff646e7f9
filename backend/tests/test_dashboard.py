"""
Tests for dashboard metrics, filters and store options.
"""
import pytest

from camera_monitor.dashboard import (
	ALL_STORES,
	DashboardFilters,
	QuickFilter,
	apply_filters,
	compute_metrics,
	stores,
)
from camera_monitor.dashboard.filters import matches_status, matches_store
from camera_monitor.schemas.camera import CameraStatus

from factories import make_camera


@pytest.fixture
def fleet():
	return [
		make_camera(1, name="Entrada", store="Loja Centro", status="online", channels_total=4, channels_working=4, channels_blackscreen=0),
		make_camera(2, name="Caixa", ip="10.0.0.2", store="Loja Norte", status="online", channels_total=8, channels_working=6, channels_blackscreen=2),
		make_camera(3, name="Estoque", serial="XYZ-9", store="Loja Centro", status="offline", channels_total=4, channels_working=0, channels_blackscreen=0),
		make_camera(4, name="Doca", store="Loja Sul", status="online", channels_total=2, channels_working=1, channels_blackscreen=1),
		make_camera(5, name="Fundos", location="Back Office", store="Loja Norte", status="offline", channels_total=4, channels_working=0, channels_blackscreen=4),
	]


class TestMetrics:
	def test_empty(self):
		metrics = compute_metrics([])
		assert metrics.total == 0
		assert metrics.channels.total == 0

	def test_counts_and_sums(self, fleet):
		metrics = compute_metrics(fleet)
		assert metrics.total == 5
		assert metrics.online == 3
		assert metrics.offline == 2
		assert metrics.aviso == metrics.erro == metrics.reparo == 0
		assert metrics.channels.total == sum(c.channels_total for c in fleet)
		assert metrics.channels.working == 11
		assert metrics.channels.blackscreen == 7

	def test_status_buckets_partition_the_list(self):
		cameras = [make_camera(i, status=status) for i, status in enumerate(CameraStatus)]
		metrics = compute_metrics(cameras)
		assert sum(metrics.count(status) for status in CameraStatus) == len(cameras)
		assert all(metrics.count(status) == 1 for status in CameraStatus)

	def test_is_deterministic(self, fleet):
		assert compute_metrics(fleet) == compute_metrics(list(fleet))


class TestStores:
	def test_sentinel_then_first_occurrence_order(self, fleet):
		assert stores(fleet) == [ALL_STORES, "Loja Centro", "Loja Norte", "Loja Sul"]

	def test_empty_list_has_only_sentinel(self):
		assert stores([]) == [ALL_STORES]


class TestFilters:
	def test_no_filters_keep_everything(self, fleet):
		assert apply_filters(fleet, DashboardFilters()) == fleet

	def test_quick_filter_online(self, fleet):
		assert len(apply_filters(fleet, DashboardFilters(quick=QuickFilter.ONLINE))) == 3

	def test_quick_filter_working_channels(self, fleet):
		result = apply_filters(fleet, DashboardFilters(quick=QuickFilter.WORKING))
		assert [c.id for c in result] == [1, 2, 4]

	def test_quick_filter_blackscreen_channels(self, fleet):
		result = apply_filters(fleet, DashboardFilters(quick=QuickFilter.BLACKSCREEN))
		assert [c.id for c in result] == [2, 4, 5]

	def test_dropdown_status(self, fleet):
		result = apply_filters(fleet, DashboardFilters(status=CameraStatus.OFFLINE))
		assert [c.id for c in result] == [3, 5]

	def test_quick_and_dropdown_combine_with_and(self, fleet):
		filters = DashboardFilters(quick=QuickFilter.BLACKSCREEN, status=CameraStatus.OFFLINE)
		assert [c.id for c in apply_filters(fleet, filters)] == [5]

	def test_conflicting_quick_and_dropdown_match_nothing(self, fleet):
		# Kept as-is: a conflicting tile and dropdown yield an empty list.
		filters = DashboardFilters(quick=QuickFilter.ONLINE, status=CameraStatus.OFFLINE)
		assert apply_filters(fleet, filters) == []

	def test_store(self, fleet):
		result = apply_filters(fleet, DashboardFilters(store="Loja Norte"))
		assert [c.id for c in result] == [2, 5]

	def test_store_must_match_exactly(self, fleet):
		assert apply_filters(fleet, DashboardFilters(store="loja norte")) == []

	@pytest.mark.parametrize(
		"query, expected",
		[
			("entrada", [1]),
			("10.0.0.2", [2]),
			("xyz", [3]),
			("back office", [5]),
			("loja sul", [4]),
			("", [1, 2, 3, 4, 5]),
			("nothing-here", []),
		],
	)
	def test_search(self, fleet, query, expected):
		assert [c.id for c in apply_filters(fleet, DashboardFilters(query=query))] == expected

	def test_search_spans_joined_fields(self):
		camera = make_camera(1, name="Cam", ip="1.1.1.1")
		assert apply_filters([camera], DashboardFilters(query="cam 1.1")) == [camera]

	def test_store_and_status_filters_commute(self, fleet):
		by_store = [c for c in fleet if matches_store(c, "Loja Norte")]
		store_then_status = [c for c in by_store if matches_status(c, CameraStatus.ONLINE)]
		by_status = [c for c in fleet if matches_status(c, CameraStatus.ONLINE)]
		status_then_store = [c for c in by_status if matches_store(c, "Loja Norte")]
		assert store_then_status == status_then_store
		combined = apply_filters(fleet, DashboardFilters(status=CameraStatus.ONLINE, store="Loja Norte"))
		assert combined == store_then_status
