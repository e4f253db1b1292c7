import numpy as np
import matplotlib.pyplot as plt


def bladeshow(texture, ax=None, resolution=256, **kwargs):
    """
    Display a texture's mask over the unit square.

    Args:
        texture: Texture with evaluate(uv)
        ax: Matplotlib axis (creates new if None)
        resolution: Pixels along each axis
        **kwargs: Additional arguments for imshow (vmin, vmax, cmap, etc.)

    Returns:
        Matplotlib axis
    """
    if ax is None:
        ax = plt.gca()

    # Pixel centres, so no pixel sits exactly on the (0, 0) centre probe
    t = (np.arange(resolution) + 0.5) / resolution
    u, v = np.meshgrid(t, t, indexing='xy')
    values = np.asarray(texture.evaluate(np.stack([u, v], axis=-1)))[..., 0]

    vmin = kwargs.pop('vmin', 0.0)
    vmax = kwargs.pop('vmax', 1.0)
    cmap = kwargs.pop('cmap', plt.cm.gray)

    ax.imshow(values, origin='lower', extent=[0, 1, 0, 1],
              vmin=vmin, vmax=vmax, cmap=cmap, **kwargs)

    ax.set_aspect('equal')
    ax.autoscale_view()
    return ax


def sampleshow(points, ax=None, **kwargs):
    """
    Scatter sampled uv points.

    Args:
        points: uv points (N, 2)
        ax: Matplotlib axis (creates new if None)
        **kwargs: Additional arguments for scatter (s, c, alpha, etc.)

    Returns:
        Matplotlib axis
    """
    if ax is None:
        ax = plt.gca()

    points = np.asarray(points).reshape(-1, 2)
    s = kwargs.pop('s', 1.0)
    c = kwargs.pop('c', 'tab:orange')

    ax.scatter(points[:, 0], points[:, 1], s=s, c=c, **kwargs)
    ax.set_xlim(0, 1)
    ax.set_ylim(0, 1)
    ax.set_aspect('equal')
    return ax
