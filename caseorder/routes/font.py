from .crud import Resource, build_router
from ..models import Font
from ..schemas import FontIn, FontOut

FONT = Resource(
    path="/font",
    tag="font",
    model=Font,
    schema_in=FontIn,
    schema_out=FontOut,
    required=("font_name", "hexcode_id", "font_file_path"),
    bad_request="잘못된 요청 - font_name, hexcode_id, font_file_path가 필요합니다.",
    not_found="폰트를 찾을 수 없습니다.",
    deleted="폰트가 성공적으로 삭제되었습니다.",
)

router = build_router(FONT)
