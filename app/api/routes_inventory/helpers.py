"""Helper functions for inventory routes."""
from app.models import inventory_schemas as schemas
from app.services.inventory import FlatInventoryReport, LocationReport, WarehouseProductFilter


def _warning_text(report) -> str | None:
    warning = report.fetch.warning
    return str(warning) if warning is not None else None


def flat_report_to_out(
    report: FlatInventoryReport, filters: WarehouseProductFilter
) -> schemas.FlatInventoryResponse:
    """Convert a FlatInventoryReport to the API envelope."""
    return schemas.FlatInventoryResponse(
        data=report.items,
        meta=schemas.FlatInventoryMeta(
            total_items=len(report.items),
            total_units=report.total_units,
            customer_account_id=filters.customer_account_id,
            pages_fetched=report.fetch.pages_fetched,
            truncated=report.fetch.truncated,
            warning=_warning_text(report),
        ),
    )


def location_report_to_out(
    report: LocationReport, filters: WarehouseProductFilter
) -> schemas.LocationsResponse:
    """Convert a LocationReport to the API envelope."""
    return schemas.LocationsResponse(
        data=report.locations,
        meta=schemas.LocationsMeta(
            total_locations=len(report.locations),
            total_skus=report.total_skus,
            total_units=report.total_units,
            fetch_duration_ms=report.fetch.duration_ms,
            customer_account_id=filters.customer_account_id,
            pages_fetched=report.fetch.pages_fetched,
            truncated=report.fetch.truncated,
            warning=_warning_text(report),
        ),
    )
