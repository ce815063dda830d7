import io
import os
from gtts import gTTS

from hsk.config import AUDIO_CACHE_DIR

# Mandarin voice, same as the zh-CN speech synthesis of the browser card
AUDIO_LANG = "zh-CN"


def cache_path_for(text: str, cache_dir: str = AUDIO_CACHE_DIR) -> str:
    # Create a safe filename from the text (CJK characters count as alphanumeric)
    safe_filename = "".join(c if c.isalnum() else "_" for c in text)
    return os.path.join(cache_dir, f"{safe_filename}.mp3")


def get_pronunciation(text: str, cache_dir: str = AUDIO_CACHE_DIR) -> bytes:
    """Return MP3 audio for a word, generating it with gTTS on first use."""
    if not text:
        raise ValueError("Nothing to pronounce")

    os.makedirs(cache_dir, exist_ok=True)
    cache_path = cache_path_for(text, cache_dir)

    if os.path.exists(cache_path):
        with open(cache_path, "rb") as audio_file:
            return audio_file.read()

    tts = gTTS(text=text, lang=AUDIO_LANG, slow=False)
    audio_buffer = io.BytesIO()
    tts.write_to_fp(audio_buffer)

    with open(cache_path, "wb") as audio_file:
        audio_file.write(audio_buffer.getvalue())

    return audio_buffer.getvalue()
