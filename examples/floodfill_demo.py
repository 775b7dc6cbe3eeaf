from hexlattice import Hex, flood_fill_layers, line, ring

start = Hex(0, 0)
goal = Hex(4, -2)

# a wall across the straight line, open at both ends
blocked = set(line(Hex(2, 1), Hex(2, -4)))


if __name__ == "__main__":
    layers = flood_fill_layers([start], 8, obstacles=blocked)
    for depth, layer in enumerate(layers):
        print(depth, ", ".join(str(h) for h in layer))
    reached = {h: d for d, layer in enumerate(layers) for h in layer}
    print("goal steps:", reached.get(goal))
    print("ring around goal:", [str(h) for h in ring(goal, 1)])
