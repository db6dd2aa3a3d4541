"""
Lesson content for security (network security, cryptography, pentesting).
"""

from langtutor.content._helpers import lessons
from langtutor.core.models import SectionSpec

SECURITY_LESSONS = (
    {"title": "Introduction to {name}", "description": "{name} is about protecting systems and data from unauthorized access and damage.", "syntax": "Confidentiality, Integrity, Availability", "usage": "Defend systems", "code": "# The CIA triad\nconfidentiality: only authorized people can read\nintegrity:       data is not tampered with\navailability:    systems stay up for users"},
    {"title": "Threat Modeling", "description": "Identify what you protect, who might attack it and how.", "syntax": "STRIDE", "usage": "Prioritize defenses", "code": "Asset: user passwords\nThreat: credential stuffing (Spoofing)\nMitigation: rate limiting, MFA"},
    {"title": "Networking Basics", "description": "Ports, protocols and packets are where many attacks and defenses live.", "syntax": "TCP/UDP, ports, firewalls", "usage": "Understand attack surface", "code": "# List listening services on your own machine\nss -tulpn\n\n# Allow only SSH and HTTPS\nufw default deny incoming\nufw allow 22/tcp\nufw allow 443/tcp"},
    {"title": "Hashing and Passwords", "description": "Store password hashes with a slow, salted algorithm, never plain text.", "syntax": "bcrypt, argon2", "usage": "Safe credential storage", "code": "import bcrypt\n\nhashed = bcrypt.hashpw(b\"s3cret\", bcrypt.gensalt())\nassert bcrypt.checkpw(b\"s3cret\", hashed)"},
    {"title": "Encryption", "description": "Symmetric ciphers share one key; asymmetric ciphers use a key pair.", "syntax": "AES-GCM, RSA, TLS", "usage": "Protect data in transit and at rest", "code": "from cryptography.fernet import Fernet\n\nkey = Fernet.generate_key()\ntoken = Fernet(key).encrypt(b\"top secret\")\nprint(Fernet(key).decrypt(token))"},
    {"title": "Web Vulnerabilities", "description": "Injection and cross-site scripting remain the most common web flaws.", "syntax": "parameterized queries, output escaping", "usage": "Secure applications", "code": "# Vulnerable\ncursor.execute(f\"SELECT * FROM users WHERE name = '{name}'\")\n\n# Safe\ncursor.execute(\"SELECT * FROM users WHERE name = %s\", (name,))"},
    {"title": "Authorized Testing", "description": "Only test systems you own or have written permission to assess, and document scope.", "syntax": "scope, rules of engagement", "usage": "Ethical assessments", "code": "Scope: staging.example.com only\nWindow: 2024-06-01 09:00-17:00 UTC\nContact: security@example.com"},
    {"title": "Project: Harden a Server", "description": "Apply {name} practices to lock down a fresh Linux server and write up what you changed.", "syntax": "N/A", "usage": "Apply all concepts", "code": "apt update && apt upgrade -y\nadduser deploy && usermod -aG sudo deploy\nsed -i 's/^PermitRootLogin yes/PermitRootLogin no/' /etc/ssh/sshd_config\nufw default deny incoming && ufw allow OpenSSH && ufw enable\napt install -y fail2ban unattended-upgrades"},
)


def security_specs(name: str) -> list[SectionSpec]:
    return lessons(name, SECURITY_LESSONS)
