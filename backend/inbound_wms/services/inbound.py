"""INBOUND WMS - Wiring for the inbound pipeline services (built once per process)."""
from dataclasses import dataclass

from inbound_wms.config import Settings
from inbound_wms.core.ids import IdGenerator
from inbound_wms.services.asn_service import AsnService
from inbound_wms.services.dashboard_service import DashboardService
from inbound_wms.services.putaway_service import PutawayService, PutawayTaskGenerator
from inbound_wms.services.receipt_service import ReceiptService
from inbound_wms.services.sku_bin_lookup import BinLocationLookup, SkuBinLookup


@dataclass(frozen=True)
class InboundServices:
    asns: AsnService
    receipts: ReceiptService
    putaway: PutawayService
    dashboard: DashboardService


def build_inbound_services(
    settings: Settings,
    bin_lookup: BinLocationLookup | None = None,
    id_generator: IdGenerator | None = None,
) -> InboundServices:
    ids = id_generator or IdGenerator(settings.ID_SUFFIX_LENGTH)
    task_generator = PutawayTaskGenerator(
        bin_lookup or SkuBinLookup(),
        ids,
        default_priority=settings.PUTAWAY_DEFAULT_PRIORITY,
    )
    return InboundServices(
        asns=AsnService(ids, default_page_size=settings.DEFAULT_PAGE_SIZE),
        receipts=ReceiptService(ids, task_generator, default_page_size=settings.DEFAULT_PAGE_SIZE),
        putaway=PutawayService(default_page_size=settings.DEFAULT_PAGE_SIZE),
        dashboard=DashboardService(),
    )
