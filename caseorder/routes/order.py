from .crud import Resource, build_router
from ..models import Order
from ..schemas import OrderIn, OrderOut

# the only collection-style resource: supports DELETE /order/all
ORDER = Resource(
    path="/order",
    tag="order",
    model=Order,
    schema_in=OrderIn,
    schema_out=OrderOut,
    required=(
        "artwork_id", "font_id", "fontcolor_id", "normal_case_id",
        "order_date", "order_product_folder_name", "order_goods_name",
    ),
    bad_request="잘못된 요청 - 필수 정보가 누락되었습니다.",
    not_found="주문을 찾을 수 없습니다.",
    deleted="주문이 성공적으로 삭제됨",
    bulk_delete=True,
    all_deleted="모든 주문이 성공적으로 삭제됨",
    nothing_to_delete="모든 주문을 찾을 수 없습니다.",
)

router = build_router(ORDER)
