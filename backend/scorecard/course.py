"""Fixed course layouts.

The course has a front and a back nine; ``full18`` plays both in order.
"""

FRONT9 = {
    'pars': [3, 3, 4, 2, 3, 3, 3, 3, 3],
    'distances': [190, 355, 455, 130, 190, 190, 165, 150, 220],
    'nicknames': [
        'Downhill Drive',
        'Crosswind Challenge',
        'Across the Pasture',
        'Threading the Needle',
        'Tree-ohi',
        'Round the Bend',
        'Back to the Bush',
        'Drive the Line',
        'Through the V',
    ],
}

BACK9 = {
    'pars': [3, 2, 3, 3, 3, 3, 4, 3, 5],
    'distances': [234, 93, 321, 195, 213, 306, 423, 294, 675],
    'nicknames': [
        'Sunset',
        'Stiletto',
        'Tunnel Vision',
        'Lucky',
        'Lost',
        'The Damn Hole',
        'The Big Show',
        'Found',
        'Coming Home',
    ],
}

COURSE_CONFIG = {
    'front9': {'holes': 9, **FRONT9},
    'back9': {'holes': 9, **BACK9},
    'full18': {
        'holes': 18,
        'pars': FRONT9['pars'] + BACK9['pars'],
        'distances': FRONT9['distances'] + BACK9['distances'],
        'nicknames': FRONT9['nicknames'] + BACK9['nicknames'],
    },
}

COURSE_TYPES = tuple(COURSE_CONFIG)


def course_config(course_type):
    return COURSE_CONFIG.get(course_type)


def course_holes(course_type) -> int:
    return COURSE_CONFIG[course_type]['holes']


def hole_info(course_type, hole: int) -> dict:
    """Par, distance and nickname for a 1-based hole number."""
    cfg = COURSE_CONFIG[course_type]
    idx = hole - 1
    return {
        'hole': hole,
        'par': cfg['pars'][idx],
        'distance': cfg['distances'][idx],
        'nickname': cfg['nicknames'][idx],
    }
