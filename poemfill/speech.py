# speech.py — say a character out loud (gTTS mp3, else browser speech)
from __future__ import annotations

import base64
import io
import json
import logging

from gtts import gTTS, gTTSError

from poemfill.settings import SPEECH_LANG, SPEECH_PITCH, SPEECH_RATE

logger = logging.getLogger(__name__)


def tts_bytes(text: str, lang: str = SPEECH_LANG, slow: bool = False) -> bytes | None:
    """Return MP3 bytes for `text` using gTTS, or None if gTTS can't produce them."""
    if not text:
        return None
    try:
        mp3 = io.BytesIO()
        gTTS(text=text, lang=lang, slow=slow).write_to_fp(mp3)
        return mp3.getvalue()
    except (gTTSError, AssertionError, ValueError, OSError) as e:
        logger.warning("gTTS failed for %r: %s", text, e)
        return None


def speech_html(text: str, lang: str = SPEECH_LANG, rate: float = SPEECH_RATE,
                pitch: float = SPEECH_PITCH, use_gtts: bool = True) -> str:
    """HTML snippet that speaks `text` once when rendered.

    Prefers an autoplaying gTTS mp3; otherwise uses the browser's SpeechSynthesis.
    """
    audio = tts_bytes(text, lang) if use_gtts else None
    if audio:
        b64 = base64.b64encode(audio).decode("utf-8")
        return f"""
        <audio autoplay>
          <source src='data:audio/mp3;base64,{b64}' type='audio/mpeg'>
        </audio>
        """
    return f"""
        <script>
          (function() {{
            try {{ speechSynthesis.cancel(); }} catch (e) {{}}
            const u = new SpeechSynthesisUtterance({json.dumps(text)});
            u.lang = {json.dumps(lang)};
            u.rate = {rate};
            u.pitch = {pitch};
            speechSynthesis.speak(u);
          }})();
        </script>
        """
