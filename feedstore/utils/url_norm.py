from __future__ import annotations
from urllib.parse import urlparse, urlunparse, parse_qsl, urlencode
import re
import html

_DEFAULT_PORTS = {"http": 80, "https": 443}
_dup_slash_re = re.compile(r"/{2,}")
_tracking_param_re = re.compile(r"^utm_\w+", re.IGNORECASE)


def normalize_url(u: str) -> str:
    """피드 URL 정규화. 호스트가 없는 등 해석할 수 없는 값이면 ValueError"""
    if not isinstance(u, str):
        raise ValueError(f"URL은 문자열이어야 합니다: {u!r}")
    u = html.unescape(u.strip())             # "&amp;" -> "&"
    if not u:
        raise ValueError("빈 URL")
    if u.startswith("//"):
        u = "http:" + u
    elif "://" not in u:
        # "example.com/feed" 처럼 스킴이 없으면 http로 간주
        u = "http://" + u

    pr = urlparse(u)
    scheme = pr.scheme.lower()
    if not pr.hostname:
        raise ValueError(f"호스트가 없는 URL: {u}")
    netloc = pr.hostname.lower()
    if ":" in netloc:
        # IPv6 리터럴은 대괄호 유지
        netloc = f"[{netloc}]"
    if netloc.startswith("www."):
        netloc = netloc[4:]
    port = pr.port                           # 잘못된 포트면 여기서 ValueError
    if port and port != _DEFAULT_PORTS.get(scheme):
        # 기본 포트는 제거
        netloc = f"{netloc}:{port}"

    # path: // -> /, 트레일링 슬래시 제거 (루트는 빈 경로)
    path = _dup_slash_re.sub("/", pr.path).rstrip("/")

    # query: utm_* 제거 + 정렬. 반복 키(?tag=a&tag=b)는 모두 유지
    pairs = parse_qsl(pr.query, keep_blank_values=True)
    q = urlencode(sorted((k, v) for k, v in pairs if not _tracking_param_re.match(k)))

    return urlunparse((scheme, netloc, path, pr.params, q, pr.fragment))
