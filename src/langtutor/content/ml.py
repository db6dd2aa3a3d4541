"""
Lesson content for machine learning (TensorFlow, PyTorch, scikit-learn).
"""

from langtutor.content._helpers import lessons
from langtutor.core.models import SectionSpec

ML_LESSONS = (
    {"title": "Introduction to {name}", "description": "{name} is used to build models that learn patterns from data and make predictions.", "syntax": "ML models and training", "usage": "Build AI/ML models", "code": "from sklearn.linear_model import LinearRegression\n\nmodel = LinearRegression()\nmodel.fit([[1], [2], [3]], [2, 4, 6])\nprint(model.predict([[4]]))"},
    {"title": "Working with Data", "description": "Load, inspect and clean data before training anything.", "syntax": "pandas.read_csv, df.describe()", "usage": "Prepare datasets", "code": "import pandas as pd\n\ndf = pd.read_csv(\"houses.csv\")\nprint(df.describe())\ndf = df.dropna()"},
    {"title": "Train/Test Split", "description": "Hold out data the model never sees during training to measure generalization.", "syntax": "train_test_split(X, y, test_size=0.2)", "usage": "Honest evaluation", "code": "from sklearn.model_selection import train_test_split\n\nX_train, X_test, y_train, y_test = train_test_split(X, y, test_size=0.2, random_state=42)"},
    {"title": "Supervised Learning", "description": "Fit classifiers and regressors on labelled examples.", "syntax": "model.fit(X, y); model.predict(X)", "usage": "Predict labels and values", "code": "from sklearn.ensemble import RandomForestClassifier\n\nclf = RandomForestClassifier(n_estimators=100)\nclf.fit(X_train, y_train)\npredictions = clf.predict(X_test)"},
    {"title": "Evaluating Models", "description": "Accuracy, precision, recall and error metrics quantify model quality.", "syntax": "accuracy_score, classification_report", "usage": "Compare models", "code": "from sklearn.metrics import accuracy_score, classification_report\n\nprint(accuracy_score(y_test, predictions))\nprint(classification_report(y_test, predictions))"},
    {"title": "Neural Networks", "description": "Stack layers of neurons and train them with gradient descent.", "syntax": "nn.Sequential(nn.Linear(...), nn.ReLU(), ...)", "usage": "Images, text, complex patterns", "code": "import torch.nn as nn\n\nmodel = nn.Sequential(\n    nn.Linear(784, 128),\n    nn.ReLU(),\n    nn.Linear(128, 10),\n)"},
    {"title": "Training Loops", "description": "Each step runs a forward pass, computes the loss and updates weights.", "syntax": "loss.backward(); optimizer.step()", "usage": "Fit neural networks", "code": "optimizer = torch.optim.Adam(model.parameters(), lr=1e-3)\nloss_fn = nn.CrossEntropyLoss()\n\nfor xb, yb in loader:\n    optimizer.zero_grad()\n    loss = loss_fn(model(xb), yb)\n    loss.backward()\n    optimizer.step()"},
    {"title": "Overfitting and Regularization", "description": "Dropout, weight decay and early stopping keep models from memorizing the training set.", "syntax": "nn.Dropout(p), weight_decay", "usage": "Better generalization", "code": "model = nn.Sequential(\n    nn.Linear(784, 128),\n    nn.ReLU(),\n    nn.Dropout(0.2),\n    nn.Linear(128, 10),\n)\noptimizer = torch.optim.AdamW(model.parameters(), weight_decay=0.01)"},
    {"title": "Project: Digit Classifier", "description": "Train a handwritten digit classifier with {name} and report its test accuracy.", "syntax": "N/A", "usage": "Apply all concepts", "code": "from sklearn.datasets import load_digits\nfrom sklearn.model_selection import train_test_split\nfrom sklearn.svm import SVC\n\nX, y = load_digits(return_X_y=True)\nX_train, X_test, y_train, y_test = train_test_split(X, y, test_size=0.2)\nclf = SVC(gamma=0.001).fit(X_train, y_train)\nprint(f\"Accuracy: {clf.score(X_test, y_test):.2%}\")"},
)


def ml_specs(name: str) -> list[SectionSpec]:
    return lessons(name, ML_LESSONS)
