import argparse
import logging
import random
from scalargrad.nn import MLP

logger = logging.getLogger("xor")

BATCH = [([0, 0], 0), ([0, 1], 1), ([1, 0], 1), ([1, 1], 0)]


def train(model, batch, epochs, lr):
    loss = None
    for epoch in range(epochs):
        # gradients accumulate across backward() calls
        model.zero_grad()
        outputs = [model(xs) for xs, _ in batch]
        expected = [exp for _, exp in batch]
        losses = [(exp-act)**2 for exp, act in zip(expected, outputs)]
        loss = sum(losses) * (1.0 / len(losses))
        loss.backward()
        for p in model.parameters():
            p.data -= lr * p.grad
        if epoch % 100 == 0:
            logger.info("epoch %4d loss %.4f", epoch, loss.data)
    return None if loss is None else loss.data


def positive_int(s):
    n = int(s)
    if n < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {s}")
    return n


def main(argv=None):
    parser = argparse.ArgumentParser(description="train a small MLP on XOR")
    parser.add_argument("--epochs", type=positive_int, default=1000)
    parser.add_argument("--hidden", type=positive_int, default=5)
    parser.add_argument("--lr", type=float, default=0.1)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    random.seed(args.seed)
    model = MLP(2, [args.hidden, 1])
    logger.info("training %r", model)
    train(model, BATCH, args.epochs, args.lr)

    logger.info("params %s", [p.data for p in model.parameters()])
    misses = 0
    for xs, exp in BATCH:
        result = model(xs)
        if abs(result.data-exp) >= 0.1:
            logger.warning("%s -> %.4f is not near %s", xs, result.data, exp)
            misses += 1
    return 1 if misses else 0


if __name__ == "__main__":
    raise SystemExit(main())
