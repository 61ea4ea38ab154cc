"""
Training Doctrine

Two ways to build a GaussianNb, ONE set of statistics:

------------------------------------------------------------
Batch
------------------------------------------------------------
- GaussianNbFitEngine.fit(dataset)
- Finite dataset, fully materialized

------------------------------------------------------------
Online
------------------------------------------------------------
- GaussianNbFitEngine.fit_with(model, chunk), folded by IncrementalTrainer
- Chunks are consumed once and discarded
- The model IS the accumulated state (count / mean / variance per class)

Both paths produce the same model up to float rounding, with one known
exception: the smoothing epsilon is derived from each batch's own
variance, so chunked fits can differ from a single fit by a
rounding-sized amount.
"""
