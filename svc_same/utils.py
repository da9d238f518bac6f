import hashlib
import json
from typing import Any, Dict, Optional

def compute_etag(payload: Any) -> str:
    if isinstance(payload, bytes):
        body = payload
    else:
        body = json.dumps(payload, sort_keys=True, separators=(",", ":"), ensure_ascii=False).encode("utf-8")
    return '"' + hashlib.sha256(body).hexdigest() + '"'

def make_cache_headers(max_age: int, etag: Optional[str] = None) -> Dict[str, str]:
    if max_age > 0:
        headers = {"Cache-Control": f"public, max-age={max_age}"}
    else:
        headers = {"Cache-Control": "no-store"}
    if etag:
        headers["ETag"] = etag
    return headers
