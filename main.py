"""
AgeVerify - 年龄验证服务 API 入口

运行：
    uv run python main.py

或使用 uvicorn：
    uv run uvicorn main:app --host 0.0.0.0 --port 8000 --reload

API 文档：
    http://localhost:8000/docs
"""

from interfaces.api import VerifyApp

verify_app = VerifyApp()

# 导出 FastAPI app (用于 uvicorn)
app = verify_app.fastapi


if __name__ == "__main__":
    print("=" * 50)
    print("启动 AgeVerify")
    print("=" * 50)
    print()
    print("API 端点:")
    print("  POST /api/v1/verifications              - 开始验证")
    print("  GET  /api/v1/verifications/{id}/status  - 查询验证状态")
    print("  POST /api/v1/verifications/authorize-url - 构建托管授权页地址")
    print("  POST /api/v1/navigation/classify        - 判断导航是否命中回调")
    print()
    print("文档: http://localhost:8000/docs")
    print("=" * 50)

    verify_app.run(host="0.0.0.0", port=8000)
