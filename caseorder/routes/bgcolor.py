from .crud import Resource, build_router
from ..models import BgColor
from ..schemas import BgColorIn, BgColorOut

BGCOLOR = Resource(
    path="/bgcolor",
    tag="bgcolor",
    model=BgColor,
    schema_in=BgColorIn,
    schema_out=BgColorOut,
    required=("bgcolor_name", "hexcode_id"),
    bad_request="잘못된 요청 - bgcolor_name과 hexcode_id가 필요합니다.",
    not_found="배경 색상을 찾을 수 없습니다.",
    deleted="배경 색상이 성공적으로 삭제되었습니다.",
)

router = build_router(BGCOLOR)
