from camera_monitor.dashboard.export import export_filename, export_rows, to_csv, write_export
from camera_monitor.dashboard.filters import ALL_STORES, DashboardFilters, QuickFilter, apply_filters, stores
from camera_monitor.dashboard.metrics import ChannelTotals, DashboardMetrics, compute_metrics

__all__ = [
	"ALL_STORES",
	"ChannelTotals",
	"DashboardFilters",
	"DashboardMetrics",
	"QuickFilter",
	"apply_filters",
	"compute_metrics",
	"export_filename",
	"export_rows",
	"stores",
	"to_csv",
	"write_export",
]
