"""
Engines (pure numeric layer)

- no I/O
- no model persistence
- inputs are plain ndarrays; the model is read-only except inside
  GaussianNbFitEngine.fit_with, on a model it resumed itself
"""
