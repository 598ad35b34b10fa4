import matplotlib.pyplot as plt
import numpy as np

from ..optim.matrix_chain import ChainOptimizer

imshow_kwargs = {
    "cmap": "viridis",
    "interpolation": "nearest",
}


class TablePlotter:
    def __init__(
        self,
        optimizer: ChainOptimizer,
        existing_axes=None,
        annotate: bool = True,
    ):
        if existing_axes is None:
            self.fig, self.axes = plt.subplots(1, 2, figsize=(10, 4.5))
        else:
            self.axes = existing_axes
            self.fig = self.axes[0].figure

        self.optimizer = optimizer
        self.annotate = annotate

    @staticmethod
    def _masked(tensor):
        # unused cells are exported as -1
        values = tensor.numpy()
        return np.ma.masked_where(values < 0, values)

    def _plot_table(self, ax, tensor, title):
        values = self._masked(tensor)
        n = values.shape[0]
        image = ax.imshow(values, **imshow_kwargs)
        self.fig.colorbar(image, ax=ax, shrink=0.8)

        ticks = np.arange(n)
        ax.set_xticks(ticks, labels=[str(t + 1) for t in ticks])
        ax.set_yticks(ticks, labels=[str(t + 1) for t in ticks])
        ax.set(title=title, xlabel="j", ylabel="i")

        if self.annotate:
            for i, j in zip(*np.nonzero(~np.ma.getmaskarray(values))):
                ax.text(j, i, str(values[i, j]), ha="center", va="center", fontsize=7, color="w")
        return image

    def plot(self):
        self.cost_image = self._plot_table(
            self.axes[0], self.optimizer.cost_tensor(), "m (costs)"
        )
        self.split_image = self._plot_table(
            self.axes[1], self.optimizer.split_tensor(), "s (splits)"
        )
        self.fig.suptitle(self.optimizer.parenthesization())
        return self.fig

    def save(self, fname: str):
        self.fig.savefig(fname)

    def close(self):
        plt.close(self.fig)
