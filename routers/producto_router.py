from infrastructure.context import PRODUCTOS
from routers.records import build_record_router

router = build_record_router(PRODUCTOS)
