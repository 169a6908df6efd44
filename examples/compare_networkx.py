# pylint: disable=invalid-name
import random
from time import perf_counter

import networkx as nx

from capflow import from_networkx, max_flow

random.seed(7)
G = nx.gnp_random_graph(60, 0.15, seed=7, directed=True)
for u, v in G.edges():
    G.edges[u, v]["capacity"] = random.randint(1, 50)

graph, node_map = from_networkx(G)
src, dst = node_map.to_index[0], node_map.to_index[59]

start = perf_counter()
result = max_flow(graph, src, dst)
capflow_time = perf_counter() - start

start = perf_counter()
nx_value = nx.maximum_flow_value(G, 0, 59)
nx_time = perf_counter() - start

print(
    f"capflow:  {result.total_flow} "
    f"({result.augmentations} paths, {capflow_time:.4f} s)"
)
print(f"networkx: {nx_value} ({nx_time:.4f} s)")
print(f"min cut: {[node_map.name_edge(e) for e in result.min_cut]}")
assert result.total_flow == nx_value
