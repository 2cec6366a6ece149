"""
Client context for log lines.

Identifies which client process (and which host) produced a log record,
so logs from several running clients can be told apart.
"""

from functools import lru_cache
import os
import socket


@lru_cache(maxsize=1)
def get_service_context() -> str:
    client_name = os.getenv('SERVICE_NAME', 'ticketing-client')
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')

    try:
        host = socket.gethostname().split('.')[0][:12]
    except OSError:
        host = 'unknown'

    return f'{client_name}@{deploy_env}:{host}:{os.getpid()}'
