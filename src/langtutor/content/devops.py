"""
Lesson content for DevOps tooling (Docker, Kubernetes, Terraform, AWS, CI).
"""

from langtutor.content._helpers import lessons
from langtutor.core.models import SectionSpec


def tool_purpose(name: str) -> str:
    """Describe what kind of DevOps tool a display name refers to."""
    lowered = name.lower()
    if "docker" in lowered:
        return "containerization"
    if "kubernetes" in lowered or lowered.strip() == "k8s":
        return "container orchestration"
    return "infrastructure management"


DEVOPS_LESSONS = (
    {"title": "Containers", "description": "Containers package an application with its dependencies so it runs the same everywhere.", "syntax": "FROM, COPY, RUN, CMD", "usage": "Reproducible environments", "code": "FROM python:3.12-slim\nWORKDIR /app\nCOPY requirements.txt .\nRUN pip install -r requirements.txt\nCOPY . .\nCMD [\"python\", \"app.py\"]"},
    {"title": "Building and Running Images", "description": "Build an image from a Dockerfile and run it as a container.", "syntax": "docker build -t name . ; docker run -p host:container name", "usage": "Local development and testing", "code": "docker build -t myapp .\ndocker run -d -p 8000:8000 --name web myapp\ndocker logs -f web"},
    {"title": "Multi-container Apps", "description": "Compose files describe several services and how they connect.", "syntax": "docker compose up", "usage": "App plus database locally", "code": "services:\n  web:\n    build: .\n    ports: [\"8000:8000\"]\n    depends_on: [db]\n  db:\n    image: postgres:16\n    environment:\n      POSTGRES_PASSWORD: example"},
    {"title": "Orchestration", "description": "Kubernetes runs containers across a cluster and keeps the desired number healthy.", "syntax": "kind: Deployment, replicas, selector", "usage": "Scale and self-heal", "code": "apiVersion: apps/v1\nkind: Deployment\nmetadata:\n  name: web\nspec:\n  replicas: 3\n  selector:\n    matchLabels: { app: web }\n  template:\n    metadata:\n      labels: { app: web }\n    spec:\n      containers:\n        - name: web\n          image: myapp:1.0\n          ports: [{ containerPort: 8000 }]"},
    {"title": "Infrastructure as Code", "description": "Declare cloud resources in files that can be reviewed, versioned and applied.", "syntax": "resource \"type\" \"name\" { ... }", "usage": "Repeatable infrastructure", "code": "resource \"aws_s3_bucket\" \"assets\" {\n  bucket = \"my-app-assets\"\n}\n\n# terraform init && terraform plan && terraform apply"},
    {"title": "Continuous Integration", "description": "Run tests and builds automatically on every push.", "syntax": "on: push, jobs, steps", "usage": "Catch problems early", "code": "name: CI\non: [push]\njobs:\n  test:\n    runs-on: ubuntu-latest\n    steps:\n      - uses: actions/checkout@v4\n      - run: docker build -t myapp .\n      - run: docker run myapp pytest"},
    {"title": "Monitoring and Logs", "description": "Collect logs and metrics so you know when something breaks.", "syntax": "kubectl logs, health checks", "usage": "Operate production systems", "code": "kubectl get pods\nkubectl logs deploy/web --tail=100\nkubectl describe pod web-7c9d8"},
    {"title": "Project: Deploy a Web App", "description": "Containerize a web app, push it through CI and deploy it with {name}.", "syntax": "N/A", "usage": "Apply all concepts", "code": "docker build -t registry.example.com/web:1.0 .\ndocker push registry.example.com/web:1.0\nkubectl apply -f deployment.yaml\nkubectl rollout status deploy/web"},
)


def devops_specs(name: str) -> list[SectionSpec]:
    """DevOps lessons, introduced according to what the tool is for."""
    intro = {
        "title": "Introduction to {name}",
        "description": f"{{name}} is a tool for {tool_purpose(name)}.",
        "syntax": "DevOps automation",
        "usage": "Automate deployment and infrastructure",
        "code": "# Typical workflow\nbuild -> test -> package -> deploy -> monitor",
    }
    return lessons(name, (intro, *DEVOPS_LESSONS))
