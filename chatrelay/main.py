import argparse
import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import chatrelay.config.config as configs
from chatrelay.api.v1.route import api_router as MainRouter
from chatrelay.exceptions import RelayError

logging.basicConfig(level=configs.LOG_LEVEL, format="[%(asctime)s] %(levelname)s %(name)s - %(message)s")
logger = logging.getLogger(__name__)

app = FastAPI(title="chatrelay", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type"],
)
app.include_router(router=MainRouter, prefix="/api")


@app.exception_handler(RelayError)
async def relay_error_handler(_: Request, exc: RelayError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.on_event("startup")
def check_config() -> None:
    configs.warn_if_unconfigured()


def run() -> None:
    parser = argparse.ArgumentParser(description="Serve the chat relay API.")
    parser.add_argument("--host", default=configs.HOST)
    parser.add_argument("--port", type=int, default=configs.PORT)
    args = parser.parse_args()

    logger.info("Server is running on http://%s:%s", args.host, args.port)
    uvicorn.run(app, host=args.host, port=args.port, log_level=configs.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
