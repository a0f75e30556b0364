from django.db import connection, DatabaseError
from django.http import JsonResponse


def health_check(request):
    """Liveness check including a database round trip."""
    try:
        with connection.cursor() as cursor:
            cursor.execute('SELECT 1')
    except DatabaseError:
        return JsonResponse({'status': 'unavailable'}, status=503)
    return JsonResponse({'status': 'ok'})


def error_404(request, exception):
    """Custom 404 handler."""
    return JsonResponse({
        'kind': 'resource_not_found_error',
        'message': 'Not found',
        'status': 404
    }, status=404)


def error_500(request):
    """Custom 500 handler."""
    return JsonResponse({
        'kind': 'server_error',
        'message': 'Internal server error',
        'status': 500
    }, status=500)
