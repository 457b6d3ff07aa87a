"""
Dictionary of concrete scripture keywords.

Maps common verse words to a vivid image so a passage without an authored
keyword list still gets keyword checks.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class KeywordImage:
    image: str
    emoji: str
    senses: tuple[str, ...]


KEYWORD_IMAGE_MAP: Final[dict[str, KeywordImage]] = {
    # Nature / plants
    "포도나무": KeywordImage("보라색 포도가 주렁주렁 매달린 거대한 나무", "🍇", ("시각: 보라색", "후각: 달콤", "촉각: 거친 줄기")),
    "양": KeywordImage("하얀 털 복슬복슬한 양 떼", "🐑", ("시각: 흰색 양", "촉각: 부드러운 털", "청각: 메에~")),
    "목자": KeywordImage("긴 지팡이 든 목자", "🧑‍🌾", ("시각: 지팡이", "청각: 호루라기")),
    "물": KeywordImage("맑고 반짝이는 시냇물", "💧", ("시각: 투명한 물", "청각: 졸졸", "촉각: 차가움")),
    "빛": KeywordImage("눈부시게 빛나는 황금빛 광선", "✨", ("시각: 황금빛", "촉각: 따뜻함")),
    "길": KeywordImage("뻗어나가는 돌길", "🛤️", ("시각: 돌길", "촉각: 딱딱한 돌", "청각: 발소리")),
    "문": KeywordImage("거대한 아치형 나무문", "🚪", ("시각: 아치형", "촉각: 나무 질감", "청각: 삐걱")),
    "바위": KeywordImage("거대한 화강암 바위", "🪨", ("시각: 회색", "촉각: 단단하고 차가움")),
    "불": KeywordImage("타오르는 주홍색 불꽃", "🔥", ("시각: 주홍색", "촉각: 뜨거움", "청각: 타닥타닥")),
    "바람": KeywordImage("머리카락을 휘날리는 강한 바람", "🌬️", ("촉각: 시원함", "청각: 쉬이~")),

    # Abstract concepts -> concrete images
    "사랑": KeywordImage("심장 모양의 빛나는 루비 보석", "❤️", ("시각: 붉은 빛", "촉각: 따뜻한 온기")),
    "진리": KeywordImage("환하게 빛나는 황금 등불", "💡", ("시각: 밝은 빛", "촉각: 따뜻함")),
    "믿음": KeywordImage("흔들림 없는 닻", "⚓", ("시각: 금속 닻", "촉각: 무겁고 단단")),
    "소망": KeywordImage("떠오르는 새벽 태양", "🌅", ("시각: 주황-금색", "촉각: 점점 따뜻해짐")),
    "평안": KeywordImage("잔잔한 호수 위 작은 배", "⛵", ("시각: 고요한 수면", "청각: 물결 찰랑")),
    "은혜": KeywordImage("하늘에서 내리는 금빛 비", "🌧️", ("시각: 금빛 물방울", "촉각: 부드러운 빗방울")),
    "구원": KeywordImage("절벽에서 뻗어온 밧줄", "🪢", ("시각: 굵은 밧줄", "촉각: 거친 질감")),
    "죄": KeywordImage("무거운 검은 쇠사슬", "⛓️", ("시각: 검은색", "촉각: 차갑고 무거움", "청각: 철컹")),
    "영생": KeywordImage("시들지 않는 황금빛 나무", "🌳", ("시각: 황금 잎", "촉각: 생명의 온기")),
    "십자가": KeywordImage("언덕 위 빛나는 나무 십자가", "✝️", ("시각: 빛줄기", "촉각: 거친 나무")),
    "하나님": KeywordImage("구름 위에서 내려오는 찬란한 빛", "☁️", ("시각: 눈부신 빛", "청각: 웅장한 울림")),
    "예수": KeywordImage("빛나는 흰 옷 입은 인물", "🕊️", ("시각: 눈부신 흰빛", "촉각: 평안한 온기")),
    "성령": KeywordImage("하늘에서 내려오는 비둘기와 불꽃", "🔥", ("시각: 비둘기+불꽃", "청각: 바람 소리")),
}


def find_known_keywords(text: str) -> list[tuple[str, KeywordImage]]:
    """Return (keyword, image) pairs for dictionary words found in the text."""
    return [
        (keyword, data)
        for keyword, data in KEYWORD_IMAGE_MAP.items()
        if keyword in text
    ]


def suggest_keywords(text: str) -> list[str]:
    """Keywords to check in an attempt when the passage has none authored."""
    return [keyword for keyword, _ in find_known_keywords(text)]
