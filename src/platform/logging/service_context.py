"""
Service context for log lines: which service, which environment, which process.
"""

import os
from functools import lru_cache


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', 'inventory-api')
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')
    hostname = os.getenv('HOSTNAME', '')

    # Containers get a short host id, local runs use the PID
    instance = hostname[:12] if hostname else str(os.getpid())

    return f'{service_name}@{deploy_env}:{instance}'
