from projector.errors import FatalError, FeatureNotYetSupported, MissingFile
from projector.details.model_loader import GeneratorModelLoader
