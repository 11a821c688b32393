from .crud import Resource, build_router
from ..models import FontColor
from ..schemas import FontColorIn, FontColorOut

FONTCOLOR = Resource(
    path="/fontcolor",
    tag="fontcolor",
    model=FontColor,
    schema_in=FontColorIn,
    schema_out=FontColorOut,
    required=("fontcolor_name",),
    bad_request="잘못된 요청 - fontcolor_name이 필요합니다.",
    not_found="폰트 색상을 찾을 수 없습니다.",
    deleted="폰트 색상이 성공적으로 삭제되었습니다.",
)

router = build_router(FONTCOLOR)
