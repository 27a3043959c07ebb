Position = tuple[int, int]


def init_neighbors(w: int, h: int) -> dict[Position, frozenset[Position]]:
    ns: dict[Position, frozenset[Position]] = {}
    for x in range(w):
        for y in range(h):
            n = []
            for dx in range(-1, 2):
                nx = x + dx
                if nx < 0 or nx >= w:
                    continue
                for dy in range(-1, 2):
                    ny = y + dy
                    if ny < 0 or ny >= h:
                        continue
                    if dx == 0 and dy == 0:
                        continue
                    n.append((nx, ny))
            ns[(x, y)] = frozenset(n)
    return ns


NEIGHBORS44 = init_neighbors(4, 4)
