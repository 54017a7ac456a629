import sys
from pathlib import Path

from fastapi import FastAPI

from src.apps.api import router
from src.config.settings import get_settings

settings = get_settings()

# --- アプリケーション初期化 ---

app = FastAPI(
    title="Git Compare Tree API",
    version="0.1.0",
    description="Lists the files changed against a base branch as a collapsed directory tree",
)

# --- DEBUG設定に基づきモックの読み込み先を追加 ---

if settings.DEBUG:
    dev_path = Path(__file__).parent.parent / "dev"
    if dev_path.exists():
        sys.path.append(str(dev_path))
        print("🔧 'dev' directory added to sys.path for mock imports.")
    else:
        print("⚠️ 'dev' directory not found. Using real GitQuery.")

app.include_router(router.router, prefix="/api")


@app.get("/health")
async def health_check():
    """
    Simple health check endpoint to confirm the API is running.
    """
    return {"status": "ok"}
