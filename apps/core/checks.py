"""
System checks for the storage connection.

``manage.py check --database default`` runs the database-tagged checks,
which makes an unreachable database visible before the server starts.
"""

from django.core.checks import Error, Tags, register
from django.db import DatabaseError, connections


def probe_database(alias='default'):
    """
    Open a cursor on ``alias`` and run a trivial query.

    Returns:
        None when the database answers, otherwise the error message.
    """
    try:
        with connections[alias].cursor() as cursor:
            cursor.execute('SELECT 1')
            cursor.fetchone()
    except DatabaseError as exc:
        return str(exc)
    return None


@register(Tags.database)
def database_reachable_check(app_configs, databases=None, **kwargs):
    errors = []
    for alias in databases or []:
        problem = probe_database(alias)
        if problem:
            errors.append(
                Error(
                    f"Database '{alias}' is unreachable: {problem}",
                    hint='Check DATABASE_URL or the DB_* environment variables.',
                    id='core.E001',
                )
            )
    return errors
