"""
Lesson content for styling languages (CSS, Tailwind).
"""

from langtutor.content._helpers import lessons
from langtutor.core.models import SectionSpec

STYLING_LESSONS = (
    {
        "title": "{name} HOME",
        "description": "{name} describes how HTML elements are displayed: colors, spacing, layout and animation. One stylesheet can control the look of an entire website.",
        "syntax": "selector { property: value; }",
        "usage": "Visual presentation of webpages",
        "code": "h1 {\n  color: blue;\n  font-size: 32px;\n  text-align: center;\n}",
    },
    {
        "title": "Selectors",
        "description": "Target elements by tag, class or id, and combine selectors for precision.",
        "syntax": "element, .class, #id",
        "usage": "Select elements to style",
        "code": "p { color: black; }\n.highlight { background: yellow; }\n#header { font-size: 24px; }\nnav a { text-decoration: none; }",
    },
    {
        "title": "Colors and Backgrounds",
        "description": "Set colors with hex, RGB, HSL or named colors, and layer backgrounds and gradients.",
        "syntax": "color, background-color, background-image",
        "usage": "Colorful designs",
        "code": "h1 { color: #3366cc; }\ndiv { background-color: rgba(255, 0, 0, 0.5); }\n.hero { background: linear-gradient(to right, #ff6b6b, #4ecdc4); }",
    },
    {
        "title": "Box Model",
        "description": "Every element is a box made of content, padding, border and margin.",
        "syntax": "width, height, padding, border, margin",
        "usage": "Control spacing and sizing",
        "code": ".box {\n  width: 300px;\n  padding: 20px;\n  border: 2px solid black;\n  margin: 10px;\n  box-sizing: border-box;\n}",
    },
    {
        "title": "Typography",
        "description": "Control font family, size, weight and line height.",
        "syntax": "font-family, font-size, font-weight",
        "usage": "Readable text styling",
        "code": "body {\n  font-family: Arial, sans-serif;\n  font-size: 16px;\n  line-height: 1.6;\n}\nh1 {\n  font-size: 2.5rem;\n  font-weight: bold;\n}",
    },
    {
        "title": "Flexbox",
        "description": "A one-dimensional layout system for rows or columns of items.",
        "syntax": "display: flex, justify-content, align-items",
        "usage": "Flexible layouts",
        "code": ".container {\n  display: flex;\n  justify-content: space-between;\n  align-items: center;\n  gap: 20px;\n}",
    },
    {
        "title": "Grid",
        "description": "A two-dimensional layout system for rows and columns at once.",
        "syntax": "display: grid, grid-template-columns",
        "usage": "Complex layouts",
        "code": ".grid {\n  display: grid;\n  grid-template-columns: repeat(3, 1fr);\n  gap: 20px;\n}",
    },
    {
        "title": "Positioning",
        "description": "Take elements out of the normal flow and place them precisely.",
        "syntax": "position: static | relative | absolute | fixed | sticky",
        "usage": "Precise element placement",
        "code": ".fixed {\n  position: fixed;\n  top: 0;\n  width: 100%;\n}\n.absolute {\n  position: absolute;\n  top: 10px;\n  right: 10px;\n}",
    },
    {
        "title": "Responsive Design",
        "description": "Media queries apply styles for different screen sizes.",
        "syntax": "@media (condition) { styles }",
        "usage": "Mobile-friendly websites",
        "code": ".container { width: 100%; }\n@media (min-width: 768px) {\n  .container { width: 750px; }\n}\n@media (min-width: 1024px) {\n  .container { width: 1000px; }\n}",
    },
    {
        "title": "Transitions",
        "description": "Animate property changes smoothly over time.",
        "syntax": "transition: property duration timing-function",
        "usage": "Animated hover effects",
        "code": "button {\n  background: blue;\n  transition: background 0.3s ease;\n}\nbutton:hover {\n  background: darkblue;\n}",
    },
    {
        "title": "Animations",
        "description": "Describe multi-step motion with keyframes.",
        "syntax": "@keyframes name { ... }",
        "usage": "Engaging animations",
        "code": "@keyframes fadeIn {\n  from { opacity: 0; }\n  to { opacity: 1; }\n}\n.fade { animation: fadeIn 1s ease; }",
    },
    {
        "title": "Transforms",
        "description": "Rotate, scale and translate elements without affecting layout.",
        "syntax": "transform: rotate() | scale() | translate()",
        "usage": "Visual effects",
        "code": ".rotate { transform: rotate(45deg); }\n.scale { transform: scale(1.5); }\n.move { transform: translateX(50px); }",
    },
    {
        "title": "Pseudo-classes",
        "description": "Style elements based on their state or position.",
        "syntax": ":hover, :focus, :nth-child",
        "usage": "Interactive states",
        "code": "a:hover { color: red; }\ninput:focus { border-color: blue; }\nli:nth-child(odd) { background: #f9f9f9; }",
    },
    {
        "title": "CSS Variables",
        "description": "Custom properties hold reusable values such as theme colors and spacing.",
        "syntax": "--var-name: value; var(--var-name)",
        "usage": "Maintainable, themeable code",
        "code": ":root {\n  --primary: #3498db;\n  --spacing: 20px;\n}\n.btn {\n  background: var(--primary);\n  padding: var(--spacing);\n}",
    },
    {
        "title": "Best Practices",
        "description": "Organize stylesheets, use meaningful class names and design mobile-first.",
        "syntax": "N/A",
        "usage": "Scalable, maintainable CSS",
        "code": "/* Good: organized, mobile-first */\n.card { width: 100%; }\n@media (min-width: 768px) {\n  .card { width: 350px; }\n}\n\n/* Bad: !important, overly specific */\n.bad { color: red !important; }",
    },
    {
        "title": "Project: Responsive Landing Page",
        "description": "Build a complete responsive landing page with {name}.",
        "syntax": "N/A",
        "usage": "Apply all CSS skills",
        "code": ":root { --primary: #667eea; }\n* { margin: 0; padding: 0; box-sizing: border-box; }\n.hero {\n  background: linear-gradient(135deg, var(--primary), #764ba2);\n  padding: 100px 2rem;\n  text-align: center;\n  color: white;\n}\n.features {\n  display: grid;\n  grid-template-columns: repeat(auto-fit, minmax(300px, 1fr));\n  gap: 2rem;\n}",
    },
)


def styling_specs(name: str) -> list[SectionSpec]:
    """Lessons for CSS and CSS tooling."""
    return lessons(name, STYLING_LESSONS)
