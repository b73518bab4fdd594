"""상품명 검색 서비스.

초성(prefix) 검색과 단어(substring) 검색을 각각 수행한 뒤
초성 결과 → 단어 결과 순으로 합치고 중복을 제거한다.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from app.exceptions import InvalidQueryError, NoResultsError
from app.utils.hangul_util import decompose_leading_consonants, initials_by_word

logger = logging.getLogger(__name__)


def match_initials(key: str, candidates: Sequence[str]) -> list[str]:
    """단어별 초성 중 하나라도 검색어의 초성으로 시작하는 상품을 모은다.

    >>> match_initials("ㄱㅂ", ["가방끈", "나무"])
    ['가방끈']
    """
    search_initial = decompose_leading_consonants(key)
    return [
        product
        for product in candidates
        if any(initial.startswith(search_initial) for initial in initials_by_word(product))
    ]


def match_substring(key: str, candidates: Sequence[str]) -> list[str]:
    """검색어를 그대로 포함하는 상품을 모은다 (대소문자 구분)."""
    return [product for product in candidates if key in product]


def dedupe(items: Iterable[str]) -> list[str]:
    """처음 등장한 순서를 유지하며 중복을 제거한다."""
    seen: set[str] = set()
    result: list[str] = []
    for item in items:
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result


def search(key: str | None, candidates: Sequence[str]) -> list[str]:
    """초성 검색 + 단어 검색 결과를 합쳐 반환한다.

    Raises:
        InvalidQueryError: 검색어가 없거나 공백뿐인 경우
        NoResultsError: 두 검색 모두 결과가 없는 경우
    """
    # 공백뿐인 검색어는 초성이 빈 문자열이 되어 모든 상품과 매칭되므로 거부
    if not key or not key.strip():
        raise InvalidQueryError()

    initials_result = match_initials(key, candidates)
    words_result = match_substring(key, candidates)
    result = dedupe([*initials_result, *words_result])

    logger.debug(
        "검색 key=%r 초성=%d건 단어=%d건 최종=%d건",
        key, len(initials_result), len(words_result), len(result),
    )

    if not result:
        raise NoResultsError()
    return result


class ProductSearchService:
    """시작 시 로드된 상품 목록에 대한 검색 서비스."""

    def __init__(self, products: Sequence[str]):
        self.products = tuple(products)

    @property
    def count(self) -> int:
        return len(self.products)

    def search(self, key: str | None) -> list[str]:
        return search(key, self.products)
