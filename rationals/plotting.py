import matplotlib.pyplot as plt


def plot_convergence(partial_sums, limit=None, ax=None, label=None):
    """
    Plot float values of rational partial sums against their index.

    Params:
    partial_sums  --  iterable of Rational
    limit  --  value the series tends to, drawn as a dashed line
    ax  --  matplotlib axes to draw on, a new figure is created if None
    label  --  legend label of the curve
    """
    values = [x.value() for x in partial_sums]
    if ax is None:
        fig, ax = plt.subplots(figsize=(9, 6))
    ax.plot(range(len(values)), values, 'k.-', label=label)
    if limit is not None:
        ax.axhline(float(limit), color='gray', linestyle='--')
    ax.set_xlabel('n')
    ax.grid(True)
    if label is not None:
        ax.legend()
    return ax
