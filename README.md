# bngraph

Building blocks for working with Bayesian network structures. It covers arc
sets, adjacency matrices, edge lists, cached node neighbourhoods, acyclicity
checks, CPDAGs and their DAG extensions, and bootstrap arc strengths. It also
has helpers for parent configurations, covariances, collinear columns,
adjusted degrees of freedom, Dirichlet posterior scores and conditional
probability tables.

The package is pure Python and has no runtime dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Conventions

- An arc set is a sequence of `(from, to)` pairs. A node set is a sequence of
  labels.
- An adjacency matrix is a list of rows, with `1` at `[i][j]` when there is an
  arc from node `i` to node `j`. An undirected arc is present in both
  directions.
- A discrete variable is a `bngraph.dataframe.Factor`, which holds 1-based
  level codes (`None` when missing) and a tuple of level labels. Continuous
  variables are plain sequences of numbers.
- Functions that find a problem raise `ValueError`. Functions that drop
  something from their input issue a `warnings` warning.

## A quick tour

```python
from bngraph.amat import arcs_to_amat, amat_to_arcs, has_path
from bngraph.structure import cache_structure
from bngraph.acyclic import is_pdag_acyclic
from bngraph.cpdag import cpdag, vstructures, pdag_extension

nodes = ["A", "B", "C"]
arcs = [("A", "C"), ("B", "C")]

amat = arcs_to_amat(arcs, nodes)   # [[0, 0, 1], [0, 0, 1], [0, 0, 0]]
amat_to_arcs(amat, nodes)          # [("A", "C"), ("B", "C")]
has_path(amat, 0, 2)               # True

cache_structure(nodes, amat)["C"].parents   # ("A", "B")

is_pdag_acyclic(arcs, nodes)       # True
vstructures(arcs, nodes)           # [("A", "C", "B")]
cpdag(arcs, nodes)                 # adjacency matrix of the equivalence class
pdag_extension(arcs, nodes)        # a DAG consistent with a partially directed graph
```

Parent configurations:

```python
from bngraph.dataframe import Factor
from bngraph.configurations import configurations

x = Factor([1, 2], ("a", "b"))
z = Factor([1, 1], ("x", "y"))
configurations([x, z])             # [1, 2]
```

## Modules

- `bngraph.amat`: `arcs_to_amat`, `amat_to_arcs`, `arcs_rbind` (stack two arc
  sets, optionally reversing the second), `has_path` (arcs followed in either
  direction when undirected), `directed_path` (directed arcs only), and
  `inv_uptri3` (row and column of a cell of the strict upper triangle).
- `bngraph.elist`: `arcs_to_elist` and `elist_to_arcs`, which convert between
  arc sets and per-node edge lists. Edge lists can hold labels or zero-based
  positions, children or parents, and may carry weights.
- `bngraph.structure`: `NodeStructure` (Markov blanket, neighbours, parents and
  children), `cache_structure` for every node, and `cache_partial_structure`
  for one node.
- `bngraph.network`: `nbr_to_arcs`, `all_equal`, and `bn_recovery`.
  `all_equal` compares two networks regardless of node and arc order and
  returns `True` or a message describing the difference. `bn_recovery` checks
  that neighbourhood sets or Markov blankets are symmetric. It raises when
  `strict` is set and otherwise returns a repaired structure.
- `bngraph.acyclic`: `is_pdag_acyclic`, which returns a boolean or, with
  `return_nodes`, the nodes that may lie on a cycle.
- `bngraph.averaging`: `smart_network_averaging`, which adds arcs in increasing
  order of weight and skips, with a warning, any arc that would close a cycle.
- `bngraph.dataframe`: `Factor`, `dataframe_column` (columns by name or
  zero-based position), and `qr_matrix` (an intercept column followed by the
  named columns, as rows).
- `bngraph.cpdag`: `vstructures`, `cpdag`, `pdag_extension`.
- `bngraph.cgassumptions`: `arcs_cg_assumptions`, which rejects directed arcs
  from a continuous node to a discrete node and drops, with a warning, that
  direction of an undirected arc.
- `bngraph.bootstrap`: `ArcStrength`, `bootstrap_strength_counters`,
  `bootstrap_arc_coefficients`, `bootstrap_reduce`.
- `bngraph.configurations`: `fast_config`, `configurations`, `unique`, `dupe`,
  `int_to_factor`.
- `bngraph.covariance`: `covmat`, `update_covmat`, `variance` (the sum of
  squared deviations), `mean`, `meanvec`.
- `bngraph.dedup`: `dedup`, which drops every column whose absolute correlation
  with an earlier kept column exceeds a threshold.
- `bngraph.dfadjust`: `df_adjust` and `cdf_adjust`, which give degrees of
  freedom counting only levels with positive marginal totals.
- `bngraph.dirichlet`: `dpost` and `cdpost`, the K2 (no `iss`) and BDe (with
  `iss`) log marginal likelihood terms. Observations can be excluded as
  experimental.
- `bngraph.cpt`: `normalize_cpt`, which scales each column of a table to sum
  to one. Columns that sum to zero come out as NaN.
- `bngraph.permutation`: `PermutationTest` and `remap_permutation_test`, which
  map labels such as `"mc-mi"` or `"smc-x2"` to the statistic they use.

## What it does not do

This is a library of primitives. It has no command line.

The package does not learn network structures from data. It does not run
conditional independence tests, including the permutation tests named in
`bngraph.permutation`. It does not fit network parameters, simulate from
fitted networks, or compute full network scores. Those tasks have to be built
on top of the functions above.