"""Codec — преобразование число ↔ текст числительного.

- Encoder: число → произносимая форма / сгруппированная запись (JA, EN)
- Decoder JA: смешанная запись + фонетический конечный автомат
- Decoder EN: свёртка слов и цифровых токенов
- Digit runs: ограниченное преобразование последовательностей цифр
"""

from .decoder import decode
from .decoder_en import decode_english
from .decoder_ja import PhoneticScanState, decode_japanese, parse_mixed, parse_phonetic
from .digits import MAX_DIGIT_RUN, parse_digit_run
from .encoder import (
    NumeralDomainViolation,
    encode_grouped,
    encode_spoken,
    format_english_numeric,
    format_japanese_numeric,
    to_english,
    to_japanese,
)

__all__ = [
    # Encoder
    "NumeralDomainViolation",
    "encode_spoken",
    "encode_grouped",
    "to_japanese",
    "to_english",
    "format_japanese_numeric",
    "format_english_numeric",
    # Decoder
    "decode",
    "decode_japanese",
    "decode_english",
    "parse_mixed",
    "parse_phonetic",
    "PhoneticScanState",
    # Digit runs
    "MAX_DIGIT_RUN",
    "parse_digit_run",
]
