"""
Service context extraction for logging.

Identifies the running process in log lines: service name, deploy
environment and a short instance id (container id when available, else pid).
"""

import os
from functools import lru_cache


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', 'hotel-booking')
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')

    # HOSTNAME is the container id under docker/k8s
    instance_id = os.getenv('HOSTNAME', '')[:12] or str(os.getpid())

    return f'{service_name}@{deploy_env}:{instance_id}'
