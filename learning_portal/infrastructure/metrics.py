from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from fastapi import Response

# Метрики для HTTP запросов
http_requests_total = Counter(
    'http_requests_total',
    'Total HTTP requests',
    ['method', 'endpoint', 'status']
)

http_request_duration_seconds = Histogram(
    'http_request_duration_seconds',
    'HTTP request duration in seconds',
    ['method', 'endpoint']
)

# Метрики для кэша каталога
cache_hits_total = Counter('cache_hits_total', 'Total cache hits')
cache_misses_total = Counter('cache_misses_total', 'Total cache misses')

# Записи на курсы: created / duplicate / failed
enrollments_total = Counter('enrollments_total', 'Enroll attempts by result', ['result'])

auth_attempts_total = Counter('auth_attempts_total', 'Sign-in and sign-up attempts', ['action', 'result'])
auth_events_total = Counter('auth_events_total', 'Auth state changes emitted by the backend', ['event'])

def metrics_endpoint():
    """Endpoint для Prometheus метрик"""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
