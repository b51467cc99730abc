# pronunciation.py — context-dependent readings for polyphonic characters
from __future__ import annotations

from typing import Dict

# { line: { char: stand-in char the TTS voice reads correctly } }
# Identity entries keep the character and rely on the voice reading it in context.
POLYPHONIC_MAP: Dict[str, Dict[str, str]] = {
    "背上小书包": {"背": "悲"},   # bēi, not bèi
    "我跳着去追": {"着": "着"},   # zhe
    "数星眨眼睛": {"数": "属"},   # shǔ (verb), not shù
    "铅笔写数字": {"数": "术"},   # shù (noun)
    "筷子夹豆角": {"角": "脚"},   # jiǎo, not jué
    "捉迷藏真妙": {"藏": "藏"},   # cáng
    "关灯睡觉觉": {"觉": "叫"},   # jiào, not jué
    "梦里游太空": {"空": "空"},   # kōng
}


def resolve(line_text: str, char: str, enabled: bool = True) -> str:
    """Return the text to hand to the speech engine for `char` read inside `line_text`."""
    if not enabled or not line_text:
        return char
    return POLYPHONIC_MAP.get(line_text, {}).get(char, char)
