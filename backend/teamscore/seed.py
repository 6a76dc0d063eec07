from teamscore.services.scoring.ledger import initialize_if_empty

DEFAULT_TEAMS = [
    {
        'name': 'Les Aigles',
        'members': ['Emma', 'Lucas', 'Chloé', 'Antoine'],
        'icon': 'fas fa-eagle',
        'color': 'blue',
    },
    {
        'name': 'Les Lions',
        'members': ['Sophie', 'Thomas', 'Léa', 'Maxime'],
        'icon': 'fas fa-crown',
        'color': 'orange',
    },
    {
        'name': 'Les Dauphins',
        'members': ['Camille', 'Hugo', 'Marie', 'Paul'],
        'icon': 'fas fa-fish',
        'color': 'cyan',
    },
    {
        'name': 'Les Tigres',
        'members': ['Julia', 'Nathan', 'Sarah', 'Victor'],
        'icon': 'fas fa-fire',
        'color': 'yellow',
    },
]


def default_teacher(config):
    return {
        'teacherId': config.get('SEED_TEACHER_ID', 'ENS001'),
        'password': config.get('SEED_TEACHER_PASSWORD', 'password123'),
    }


def seed_default_data(config):
    """Seed the fixed roster; no-op once any team exists."""
    return initialize_if_empty(DEFAULT_TEAMS, default_teacher(config))
