"""
Lesson content for game development (Unity, Unreal, Godot).
"""

from langtutor.content._helpers import lessons
from langtutor.core.models import SectionSpec

GAME_LESSONS = (
    {"title": "Introduction to {name}", "description": "{name} is used to build interactive 2D and 3D games.", "syntax": "Scenes, objects, scripts", "usage": "Create games", "code": "// Unity C# script\nusing UnityEngine;\n\npublic class Hello : MonoBehaviour\n{\n    void Start()\n    {\n        Debug.Log(\"Hello, game world!\");\n    }\n}"},
    {"title": "The Game Loop", "description": "Every frame the engine reads input, updates the world and renders it.", "syntax": "Update() / _process(delta)", "usage": "Drive everything that moves", "code": "void Update()\n{\n    transform.Rotate(0, 90 * Time.deltaTime, 0);\n}"},
    {"title": "Scenes and Game Objects", "description": "Scenes hold objects; components give objects behaviour.", "syntax": "GameObject + Components", "usage": "Organize a level", "code": "var enemy = Instantiate(enemyPrefab, spawnPoint.position, Quaternion.identity);\nenemy.GetComponent<Health>().max = 100;"},
    {"title": "Player Input", "description": "Read keyboard, mouse or controller input each frame.", "syntax": "Input.GetAxis(\"Horizontal\")", "usage": "Control the player", "code": "void Update()\n{\n    float h = Input.GetAxis(\"Horizontal\");\n    float v = Input.GetAxis(\"Vertical\");\n    transform.Translate(new Vector3(h, 0, v) * speed * Time.deltaTime);\n}"},
    {"title": "Physics and Collisions", "description": "Rigidbodies and colliders simulate forces and report hits.", "syntax": "OnCollisionEnter(Collision c)", "usage": "Realistic interaction", "code": "void OnCollisionEnter(Collision collision)\n{\n    if (collision.gameObject.CompareTag(\"Enemy\"))\n    {\n        health -= 10;\n    }\n}"},
    {"title": "UI and Score", "description": "Overlay text and buttons to show score, health and menus.", "syntax": "Canvas, Text, Button", "usage": "Player feedback", "code": "public TMP_Text scoreText;\nint score;\n\npublic void AddPoint()\n{\n    score++;\n    scoreText.text = $\"Score: {score}\";\n}"},
    {"title": "Audio and Polish", "description": "Sound effects, particles and animation make a game feel alive.", "syntax": "AudioSource.PlayOneShot(clip)", "usage": "Game feel", "code": "public AudioSource source;\npublic AudioClip jumpClip;\n\nvoid Jump()\n{\n    source.PlayOneShot(jumpClip);\n}"},
    {"title": "Project: Coin Collector", "description": "Build a small coin collector game with {name}: movement, pickups, score and a win screen.", "syntax": "N/A", "usage": "Apply all concepts", "code": "public class Coin : MonoBehaviour\n{\n    void OnTriggerEnter(Collider other)\n    {\n        if (other.CompareTag(\"Player\"))\n        {\n            FindObjectOfType<ScoreManager>().AddPoint();\n            Destroy(gameObject);\n        }\n    }\n}"},
)


def game_specs(name: str) -> list[SectionSpec]:
    return lessons(name, GAME_LESSONS)
