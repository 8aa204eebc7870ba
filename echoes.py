# echoes.py - derive the trailing and leading echoes of a chain
from config import FOLLOW_DISTANCE, NUM_AHEAD_ECHOES, NUM_BEHIND_ECHOES, NUM_POINTS
from chain import Point
from fixedtrig import int_distance, trunc_div


# _step - (dx, dy) scaled to FOLLOW_DISTANCE, or None for a zero-length vector
def _step(dx, dy):
    distance = int_distance(dx, dy)
    if distance == 0:
        return None
    return (trunc_div(dx * FOLLOW_DISTANCE, distance),
            trunc_div(dy * FOLLOW_DISTANCE, distance))

# follow - pull target one step back toward prev.
# A zero-length vector has no direction, so target comes back unchanged.
def follow(prev, target):
    step = _step(target.x - prev.x, target.y - prev.y)
    if step is None:
        return target
    return Point(target.x - step[0], target.y - step[1])

# unfollow - push cur one step further along the direction prev -> cur
def unfollow(prev, cur):
    step = _step(cur.x - prev.x, cur.y - prev.y)
    if step is None:
        return cur
    return Point(cur.x + step[0], cur.y + step[1])


class EchoSet:
    """Chains indexed by offset, -NUM_BEHIND_ECHOES..NUM_AHEAD_ECHOES.

    Offset 0 is the base chain; negative offsets trail it and positive
    offsets lead it. Every chain holds NUM_POINTS points.
    """

    def __init__(self, chains):
        if len(chains) != NUM_BEHIND_ECHOES + 1 + NUM_AHEAD_ECHOES:
            raise ValueError("expected %d chains, got %d"
                             % (NUM_BEHIND_ECHOES + 1 + NUM_AHEAD_ECHOES, len(chains)))
        self._chains = list(chains)

    def __getitem__(self, offset):
        if not -NUM_BEHIND_ECHOES <= offset <= NUM_AHEAD_ECHOES:
            raise IndexError("echo offset out of range: %d" % offset)
        return self._chains[offset + NUM_BEHIND_ECHOES]

    def __len__(self):
        return len(self._chains)

    def __iter__(self):
        return iter(self._chains)

    @property
    def base(self):
        return self[0]

    def offsets(self):
        return range(-NUM_BEHIND_ECHOES, NUM_AHEAD_ECHOES + 1)


# build_echoes - expand a base chain into the full echo set.
# Only the first point_count joints move; the rest keep the base positions.
# Each echo depends on the one next closer to the base, so both sides are
# built outward from offset 0.
def build_echoes(base, point_count=NUM_POINTS):
    if not 1 <= point_count <= NUM_POINTS:
        raise ValueError("point_count must be in 1..%d, got %d" % (NUM_POINTS, point_count))
    base = tuple(base)
    if len(base) != NUM_POINTS:
        raise ValueError("a chain has %d points, got %d" % (NUM_POINTS, len(base)))

    behind = []
    closer = base
    for _ in range(NUM_BEHIND_ECHOES):
        active = list(base)
        for p in range(1, point_count):
            active[p] = follow(active[p - 1], closer[p])
        closer = tuple(active)
        behind.append(closer)

    ahead = []
    closer = base
    for _ in range(NUM_AHEAD_ECHOES):
        active = list(base)
        for p in range(1, point_count):
            active[p] = unfollow(closer[p - 1], closer[p])
        closer = tuple(active)
        ahead.append(closer)

    behind.reverse()
    return EchoSet(behind + [base] + ahead)
