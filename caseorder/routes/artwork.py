from .crud import Resource, build_router
from ..models import Artwork
from ..schemas import ArtworkIn, ArtworkOut

ARTWORK = Resource(
    path="/artwork",
    tag="artwork",
    model=Artwork,
    schema_in=ArtworkIn,
    schema_out=ArtworkOut,
    required=("title", "image_path"),  # artist is optional
    bad_request="잘못된 요청 - title, image_path가 필요합니다.",
    not_found="아트워크를 찾을 수 없습니다.",
    deleted="아트워크가 성공적으로 삭제됨",
)

router = build_router(ARTWORK)
