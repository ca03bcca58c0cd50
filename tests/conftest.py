import matplotlib

# plots are drawn without a display in tests
matplotlib.use("Agg")
