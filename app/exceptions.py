"""검색 서비스 예외 정의.

SearchError 계열은 사용자에게 그대로 노출되는 메시지와 HTTP 상태 코드를 함께 가진다.
main.py에 등록된 핸들러가 plain text 응답으로 변환한다.
"""

from __future__ import annotations


class SearchError(Exception):
    """사용자 대상 검색 오류의 기본 클래스."""

    message: str = "검색 중 오류가 발생했습니다."
    status_code: int = 400

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class InvalidQueryError(SearchError):
    """검색어가 없거나 비어 있음."""

    message = "검색어를 입력해주세요."
    status_code = 400


class NoResultsError(SearchError):
    """초성/단어 검색 모두 결과 없음."""

    message = "검색 결과가 없습니다."
    status_code = 404


class CatalogError(Exception):
    """상품 데이터 파일을 읽거나 검증할 수 없음."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")
