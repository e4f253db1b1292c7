from .plotting import bladeshow, sampleshow

__all__ = ['bladeshow', 'sampleshow']
