import random
from scalargrad.engine import Value


class Module:

    def zero_grad(self):
        for p in self.parameters():
            p.grad = 0.0

    def parameters(self):
        return []


class Neuron(Module):

    def __init__(self, nin, linear=False):
        self.w = [Value(random.uniform(-1,1)) for _ in range(nin)]
        self.b = Value(0.0)
        self.linear = linear

    def __call__(self, x):
        assert len(self.w) == len(x), f"input of size {len(x)} with {len(self.w)} weights"
        act = sum((wi*xi for wi,xi in zip(self.w, x)), self.b)
        return act if self.linear else act.relu()

    def parameters(self):
        return self.w + [self.b]

    def __repr__(self):
        return f"{'Linear' if self.linear else 'ReLU'}Neuron({len(self.w)})"

class Layer(Module):

    def __init__(self, nin, nout, linear=False):
        self.nin = nin
        self.neurons = [Neuron(nin, linear) for _ in range(nout)]

    def __call__(self, x):
        out = [n(x) for n in self.neurons]
        return out[0] if len(out) == 1 else out

    def parameters(self):
        return [p for n in self.neurons for p in n.parameters()]

    def __repr__(self):
        return f"Layer of [{', '.join(str(n) for n in self.neurons)}]"

class MLP(Module):

    def __init__(self, nin, nouts):
        sz = [nin] + nouts
        # hidden layers are ReLU, the output layer is linear
        self.layers = [Layer(sz[i], sz[i+1], linear=i==len(nouts)-1) for i in range(len(nouts))]

    def __call__(self, x):
        for layer in self.layers:
            x = layer(x)
        return x

    def parameters(self):
        return [p for layer in self.layers for p in layer.parameters()]

    def __repr__(self):
        return f"MLP of [{', '.join(str(layer) for layer in self.layers)}]"
