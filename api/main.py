"""
Unified FastAPI application for the design pattern demos.

This application provides:
1. Demo endpoints that run each pattern's driver (/demo/...)
2. Direct access to both notification factories
3. A report of how each singleton variant behaves

The demos communicate by printing; endpoints return that console output as
lines of text.

Run with:
    uv run uvicorn api.main:app --reload

Then visit http://localhost:8000/docs for interactive API documentation.
"""

import logging
from contextlib import asynccontextmanager
from typing import Callable

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from abstract_factory.demo import run_alert_service_demo
from abstract_factory.factories import UnknownFamilyError, get_factory
from factory_method.demo import run_notification_service_demo
from factory_method.factory import NotificationFactory, UnknownChannelError
from observer.demo import run_channel_demo
from shared.console import capture_stdout
from shared.logging_config import configure_logging
from singleton.demo import VARIANTS, check_variant, run_singleton_demo

configure_logging("INFO")
logger = logging.getLogger("api")


DEMOS: dict[str, Callable[[], object]] = {
    "abstract-factory": run_alert_service_demo,
    "factory-method": run_notification_service_demo,
    "observer": run_channel_demo,
    "singleton": run_singleton_demo,
}


# Request/response models
class DemoResult(BaseModel):
    """Console output of a demo run."""
    pattern: str
    output: list[str]


class FactoryMethodRequest(BaseModel):
    """Send a message through the Factory Method notifications."""
    channel: str
    message: str


class AbstractFactoryRequest(BaseModel):
    """Send a message through one Abstract Factory family."""
    family: str
    kind: str
    message: str


class SendResult(BaseModel):
    """Whether a notification was sent, and what it printed."""
    sent: bool
    output: list[str]


class SingletonReport(BaseModel):
    """How a singleton variant holds up."""
    variant: str
    same_instance: bool
    survives_pickle: bool


# Application lifespan
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown."""
    logger.info("Starting Design Pattern Demo API")
    yield
    logger.info("Shutting down")


app = FastAPI(
    title="Design Pattern Demos",
    description="""
    Classic object-oriented design patterns, applied to notifications.

    ## Endpoints

    - `/demo/{pattern}` - Run a pattern's demo and return its console output
    - `/factory-method/notify` - Create a notification by channel name and send it
    - `/abstract-factory/notify` - Send through the urgent or marketing family
    - `/singletons` - Identity and pickle behavior of each singleton variant
    """,
    version="1.0.0",
    lifespan=lifespan,
)


# =============================================================================
# Health Check
# =============================================================================

@app.get("/health", tags=["Health"])
def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "pattern-demos"}


# =============================================================================
# Demo Endpoints
# =============================================================================

@app.post("/demo/{pattern}", response_model=DemoResult, tags=["Demo"])
def run_demo(pattern: str):
    """
    Run one pattern's demo driver.

    `pattern` is one of: abstract-factory, factory-method, observer, singleton.
    """
    demo = DEMOS.get(pattern)
    if demo is None:
        raise HTTPException(status_code=404, detail=f"Unknown pattern: {pattern}")

    with capture_stdout() as captured:
        demo()
    return DemoResult(pattern=pattern, output=captured.lines)


# =============================================================================
# Factory Endpoints
# =============================================================================

@app.post("/factory-method/notify", response_model=SendResult, tags=["Factory Method"])
def factory_method_notify(request: FactoryMethodRequest):
    """
    Create a notification from a channel name and send the message.

    An empty channel sends nothing; an unknown channel is a 400.
    """
    factory = NotificationFactory()
    try:
        notification = factory.create_notification(request.channel)
    except UnknownChannelError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if notification is None:
        return SendResult(sent=False, output=[])

    with capture_stdout() as captured:
        notification.send(request.message)
    return SendResult(sent=True, output=captured.lines)


@app.post("/abstract-factory/notify", response_model=SendResult, tags=["Abstract Factory"])
def abstract_factory_notify(request: AbstractFactoryRequest):
    """
    Send a message through the urgent or marketing family.

    A kind the family doesn't support sends nothing; an unknown family is a 400.
    """
    try:
        factory = get_factory(request.family)
    except UnknownFamilyError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if not factory.supports(request.kind):
        return SendResult(sent=False, output=[])

    notification = factory.create_notification(request.kind)
    template = factory.create_template()

    with capture_stdout() as captured:
        notification.send(request.message, template)
    return SendResult(sent=True, output=captured.lines)


# =============================================================================
# Singleton Report
# =============================================================================

@app.get("/singletons", response_model=list[SingletonReport], tags=["Singleton"])
def singleton_report():
    """Check each singleton variant for a stable identity across calls and pickling."""
    return [SingletonReport(**check_variant(name)) for name in VARIANTS]
