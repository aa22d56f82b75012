import logging
import sys

from matplotlib import pyplot as plt

from config import CanvasConfig
from runner import Runner

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s | %(name)-16s | %(levelname)-7s | %(message)s',
    datefmt='%H:%M:%S'
)
logger = logging.getLogger("Shapes.Main")

if __name__ == "__main__":
    config = CanvasConfig.from_yaml(sys.argv[1]) if len(sys.argv) > 1 else CanvasConfig()
    runner = Runner(config)
    runner.populate()
    runner.report()

    # shapes keep their size when moved
    for shape in runner.canvas.shapes:
        shape.move_to(shape.get_x() + 10, shape.get_y() + 10)
    logger.info(", ".join(runner.canvas.describe()))

    runner.render(show=False)
    plt.show()
