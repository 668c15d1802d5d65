"""
Train the sequence-flavored scoring model (MLPClassifier).

Fits a small feed-forward network once, in memory, on a fixed synthetic
set of 5 legitimate and 5 fraudulent postings. Labels: 1 = legitimate,
0 = fraudulent. Deterministic for a given seed; nothing is saved to disk.
"""

from __future__ import annotations

import warnings

import numpy as np
from sklearn.exceptions import ConvergenceWarning
from sklearn.metrics import accuracy_score
from sklearn.neural_network import MLPClassifier

from jobshield.config.settings import Settings
from jobshield.jobshield_logging import get_logger
from jobshield.ml.feature_extractor import build_model_input

logger = get_logger(__name__)

HIDDEN_LAYER_SIZES = (64, 32, 16)
BATCH_SIZE = 8
LOSS_LOG_EVERY = 10

LEGITIMATE_EXAMPLES = (
    "Software Engineer position at Google. Requirements: 3+ years experience with React, Node.js. Competitive salary and benefits.",
    "Marketing Manager needed. Bachelor's degree required. Experience in digital marketing preferred. Full-time position with health benefits.",
    "Data Analyst role. SQL, Python skills required. Competitive compensation package including 401k matching.",
    "Project Manager position. PMP certification preferred. Experience with Agile methodologies. Excellent benefits package.",
    "UX Designer wanted. Portfolio required. Experience with Figma and user research. Competitive salary plus stock options.",
)

FRAUDULENT_EXAMPLES = (
    "Work from home and earn $5000 per week! No experience needed. Start immediately!",
    "URGENT: Make money fast! Easy job, guaranteed income. No interview required.",
    "Become a millionaire overnight! Work 2 hours per day. No skills needed.",
    "Quick cash opportunity! Earn $100 per hour from home. No experience required.",
    "SCAM ALERT: Easy money making scheme. Work from home, get rich quick!",
)


def build_training_data() -> tuple[np.ndarray, np.ndarray]:
    """
    Build (X, y) from the synthetic examples.

    X has shape (10, 10) float64 (padded model input); y is int64 with
    legitimate examples first (1) then fraudulent (0).
    """
    X_list = [build_model_input(text) for text in LEGITIMATE_EXAMPLES]
    X_list += [build_model_input(text) for text in FRAUDULENT_EXAMPLES]
    y = np.array(
        [1] * len(LEGITIMATE_EXAMPLES) + [0] * len(FRAUDULENT_EXAMPLES),
        dtype=np.int64,
    )
    X = np.stack(X_list)
    return X, y


def train_sequence_model(settings: Settings | None = None) -> MLPClassifier:
    """
    Fit the sequence model on the synthetic set.

    Uses settings.seed as random_state, so repeated calls with the same
    settings return models with identical predictions.
    Returns the fitted classifier.
    """
    settings = settings or Settings()
    X, y = build_training_data()

    clf = MLPClassifier(
        hidden_layer_sizes=HIDDEN_LAYER_SIZES,
        activation="relu",
        solver="adam",
        learning_rate_init=settings.learning_rate,
        batch_size=BATCH_SIZE,
        max_iter=settings.train_max_iter,
        random_state=settings.seed,
    )
    with warnings.catch_warnings():
        # Ten samples rarely hit the tolerance stop; the iteration cap is the intended stop.
        warnings.simplefilter("ignore", category=ConvergenceWarning)
        clf.fit(X, y)

    for epoch, loss in enumerate(clf.loss_curve_):
        if epoch % LOSS_LOG_EVERY == 0:
            logger.debug("sequence_training_epoch", epoch=epoch, loss=float(loss))

    train_acc = accuracy_score(y, clf.predict(X))
    logger.info(
        "sequence_training_complete",
        n_samples=len(y),
        n_iter=int(clf.n_iter_),
        final_loss=round(float(clf.loss_), 4),
        train_accuracy=round(float(train_acc), 4),
        seed=settings.seed,
    )
    return clf


def predict_legit_proba(clf: MLPClassifier, x: np.ndarray) -> float:
    """Probability (0–1) that model input x belongs to the legitimate class (label 1)."""
    X = np.asarray(x, dtype=np.float64).reshape(1, -1)
    proba = clf.predict_proba(X)[0]
    classes = list(getattr(clf, "classes_", [0, 1]))
    return float(proba[classes.index(1)])
