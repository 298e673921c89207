import re

# "#camera-position(1,2,3)" optionally followed by "-target(0,0,0)"
CAMERA_REF_RE = re.compile(r"(#camera-[A-Za-z]+\(.*?\)(?:-[A-Za-z]+\(.*?\))?)")


def preprocess_camera_refs(text: str) -> str:
    """Turn camera reference tokens into markdown links pointing at themselves."""
    if not text:
        return text or ""
    return CAMERA_REF_RE.sub(r"[\1](\1)", text)


def find_camera_refs(text: str) -> list:
    return CAMERA_REF_RE.findall(text or "")
