# run_dev.py
import os
import sys
import asyncio


# Proactor en Windows (evita "Fatal write error on socket transport" con --reload)
if sys.platform.startswith("win"):
    asyncio.set_event_loop_policy(asyncio.WindowsProactorEventLoopPolicy())


# Carga .env si existe
if os.path.exists(".env"):
    from dotenv import load_dotenv
    load_dotenv(".env")


def main():
    import uvicorn

    spec = os.getenv("APP_MODULE", "app.main:app")
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))
    reload_flag = os.getenv("RELOAD", "1").strip() in ("1", "true", "True", "yes", "on")

    print(f"🔗 API local: http://127.0.0.1:{port}")
    print(f"🌀 reload={'ON' if reload_flag else 'OFF'}")

    uvicorn.run(
        spec,
        host=host,
        port=port,
        reload=reload_flag,
        reload_dirs=["app"],
        timeout_keep_alive=30,
        log_level=os.getenv("LOG_LEVEL", "info"),
        lifespan="on",
    )


if __name__ == "__main__":
    main()
