"""한글 초성 분해 유틸리티 — 순수 유니코드 연산"""

from __future__ import annotations

# 한글 음절 유니코드 범위
_HANGUL_BASE = 0xAC00  # '가'
_HANGUL_END = 0xD7A3  # '힣'

# 초성 19자 (유니코드 순서, 호환용 자모)
_CHOSUNG_LIST = [
    "ㄱ", "ㄲ", "ㄴ", "ㄷ", "ㄸ", "ㄹ", "ㅁ", "ㅂ", "ㅃ",
    "ㅅ", "ㅆ", "ㅇ", "ㅈ", "ㅉ", "ㅊ", "ㅋ", "ㅌ", "ㅍ", "ㅎ",
]

# 중성 21자
_JUNGSUNG_LIST = [
    "ㅏ", "ㅐ", "ㅑ", "ㅒ", "ㅓ", "ㅔ", "ㅕ", "ㅖ", "ㅗ", "ㅘ", "ㅙ",
    "ㅚ", "ㅛ", "ㅜ", "ㅝ", "ㅞ", "ㅟ", "ㅠ", "ㅡ", "ㅢ", "ㅣ",
]

# 종성 28자 (첫 칸은 받침 없음)
_JONGSUNG_LIST = [
    "", "ㄱ", "ㄲ", "ㄳ", "ㄴ", "ㄵ", "ㄶ", "ㄷ", "ㄹ", "ㄺ",
    "ㄻ", "ㄼ", "ㄽ", "ㄾ", "ㄿ", "ㅀ", "ㅁ", "ㅂ", "ㅄ", "ㅅ",
    "ㅆ", "ㅇ", "ㅈ", "ㅊ", "ㅋ", "ㅌ", "ㅍ", "ㅎ",
]

_JUNGSUNG_COUNT = len(_JUNGSUNG_LIST)
_JONGSUNG_COUNT = len(_JONGSUNG_LIST)


def is_hangul_syllable(ch: str) -> bool:
    """완성형 한글 음절 한 글자인지 판별한다.

    >>> is_hangul_syllable("가")
    True
    >>> is_hangul_syllable("ㄱ")
    False
    """
    return len(ch) == 1 and _HANGUL_BASE <= ord(ch) <= _HANGUL_END


def disassemble(ch: str) -> tuple[str, ...]:
    """한 글자를 초성/중성/종성으로 분해한다.

    한글 음절이 아닌 문자(영문, 숫자, 공백, 낱자모 등)는 자기 자신 하나로 분해된다.

    >>> disassemble("방")
    ('ㅂ', 'ㅏ', 'ㅇ')
    >>> disassemble("가")
    ('ㄱ', 'ㅏ')
    >>> disassemble("A")
    ('A',)
    """
    if not is_hangul_syllable(ch):
        return (ch,)
    offset = ord(ch) - _HANGUL_BASE
    cho, rest = divmod(offset, _JUNGSUNG_COUNT * _JONGSUNG_COUNT)
    jung, jong = divmod(rest, _JONGSUNG_COUNT)
    if jong == 0:
        return (_CHOSUNG_LIST[cho], _JUNGSUNG_LIST[jung])
    return (_CHOSUNG_LIST[cho], _JUNGSUNG_LIST[jung], _JONGSUNG_LIST[jong])


def word_initials(word: str) -> str:
    """단어 하나의 초성 문자열을 만든다. 음절이 아닌 문자는 그대로 둔다.

    >>> word_initials("LG화학")
    'LGㅎㅎ'
    """
    return "".join(disassemble(ch)[0] for ch in word)


def initials_by_word(text: str) -> list[str]:
    """공백 기준 단어별 초성 문자열 목록.

    >>> initials_by_word("삼성 바이오 로직스")
    ['ㅅㅅ', 'ㅂㅇㅇ', 'ㄹㅈㅅ']
    """
    return [word_initials(word) for word in text.split()]


def decompose_leading_consonants(text: str) -> str:
    """문자열 전체의 초성을 단어 순서대로 구분자 없이 이어 붙인다.

    >>> decompose_leading_consonants("가방")
    'ㄱㅂ'
    >>> decompose_leading_consonants("현대 모비스")
    'ㅎㄷㅁㅂㅅ'
    >>> decompose_leading_consonants("")
    ''
    """
    return "".join(initials_by_word(text))
