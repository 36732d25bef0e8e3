from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from users_api.config import Settings


def create_pool(settings: Settings) -> Engine:
    url = settings.sqlalchemy_url()
    kwargs = {"pool_pre_ping": settings.pool_pre_ping}
    if not str(url).startswith("sqlite"):
        kwargs["pool_size"] = settings.pool_size
    return create_engine(url, echo=False, **kwargs)


def get_pool(request: Request) -> Engine:
    return request.app.state.pool
