# storefront/celery_worker.py
from celery import Celery

from storefront.utils.settings import (
    CELERY_BROKER_URL,
    CELERY_RESULT_BACKEND,
    CELERY_TASK_ALWAYS_EAGER,
)

celery_app = Celery(
    "storefront",
    broker=CELERY_BROKER_URL,
    backend=CELERY_RESULT_BACKEND,
)

#import tasks explicitly so celery registers them
celery_app.conf.imports = (
    "storefront.services.notification_service",
)

celery_app.conf.update(
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    timezone="UTC",
    enable_utc=True,
    #tests and local runs without a broker
    task_always_eager=CELERY_TASK_ALWAYS_EAGER,
    task_eager_propagates=CELERY_TASK_ALWAYS_EAGER,
)
