"""Error taxonomy shared by the services and the HTTP layer.

Every error carries a user-facing message and the HTTP status it maps to.
The app-level error handler renders them as ``{"message": ...}``.
"""


class TeamScoreError(Exception):
    status_code = 500
    message = 'Erreur interne'

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ValidationError(TeamScoreError):
    """Malformed or missing request fields."""
    status_code = 400
    message = 'Requête invalide'


class NotFoundError(TeamScoreError):
    """A referenced team or teacher does not exist."""
    status_code = 404
    message = 'Ressource non trouvée'


class AuthError(TeamScoreError):
    """Bad credentials or a session that does not match the acting teacher."""
    status_code = 401
    message = 'Identifiant ou mot de passe incorrect'


class InternalError(TeamScoreError):
    """Store or unexpected failure; details stay in the server log."""
    status_code = 500
