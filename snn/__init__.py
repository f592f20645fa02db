from snn.core.fit_job_handler import FitJobHandler, FitResult
from snn.core.config import TrainingConfig
from snn.core.matrix import Matrix, multiply_matrices
from snn.core.network import TwoLayerNetwork

__all__ = [
    'FitJobHandler',
    'FitResult',
    'Matrix',
    'TrainingConfig',
    'TwoLayerNetwork',
    'multiply_matrices',
]
