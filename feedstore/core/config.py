# feedstore/core/config.py
from dotenv import load_dotenv
load_dotenv()
import os

PROJECT_NAME = "Telescope Feed Store"
VERSION = "0.1.0"

# Redis
REDIS_URL = os.getenv("REDIS_URL", "redis://localhost:6379/0")
# 소켓 타임아웃(초). 이 계층에는 재시도/타임아웃 로직이 없으므로 클라이언트에서 끊는다
REDIS_SOCKET_TIMEOUT = float(os.getenv("REDIS_SOCKET_TIMEOUT", "5"))

# 레지스트리 키 이름
FEEDS_KEY = os.getenv("FEEDS_KEY", "feeds")
POSTS_KEY = os.getenv("POSTS_KEY", "posts")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
