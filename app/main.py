from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.route import objects
from services.github_storage import StorageService

# .envからGITHUB_TOKEN等を読み込む
load_dotenv()


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    # GitHubクライアントのコネクションを解放し、次回起動時に作り直す
    await StorageService.close()


app = FastAPI(lifespan=lifespan)
# CORSミドルウェアの設定
app.add_middleware(
    CORSMiddleware,
    # 許可するオリジン（フロントエンドのURL）
    allow_origins=[
        "http://labcode-web-app.com:5173",
        "http://localhost:5173",  # 開発環境用に追加
    ],
    allow_credentials=True,
    allow_methods=["*"],  # 全てのHTTPメソッドを許可
    allow_headers=["*"],  # 全てのヘッダーを許可
)

app.include_router(objects.router, prefix="/api")
