"""
Lesson content for markup languages (HTML).
"""

from langtutor.content._helpers import lessons
from langtutor.core.models import SectionSpec

MARKUP_LESSONS = (
    {
        "title": "{name} HOME",
        "description": "{name} is the standard markup language for web pages. It describes the structure of a page with elements, and browsers render those elements as headings, paragraphs, links and images.",
        "syntax": "<tag>Content</tag>",
        "usage": "Create web page structure",
        "code": "<!DOCTYPE html>\n<html>\n<head>\n  <title>My Page</title>\n</head>\n<body>\n  <h1>Hello!</h1>\n</body>\n</html>",
    },
    {
        "title": "Document Structure",
        "description": "Every HTML document has a DOCTYPE, an html root, a head for metadata and a body for visible content.",
        "syntax": "<!DOCTYPE html>",
        "usage": "Proper document structure",
        "code": '<!DOCTYPE html>\n<html lang="en">\n<head>\n  <meta charset="UTF-8">\n  <title>Title</title>\n</head>\n<body>\n  <!-- Content -->\n</body>\n</html>',
    },
    {
        "title": "Headings and Text",
        "description": "Use h1-h6 for headings, p for paragraphs, strong and em for emphasis.",
        "syntax": "<h1> to <h6>, <p>",
        "usage": "Structure text content",
        "code": "<h1>Main Title</h1>\n<h2>Subtitle</h2>\n<p>This is a <strong>paragraph</strong> with <em>emphasis</em>.</p>",
    },
    {
        "title": "Links",
        "description": "Create links with the a tag. The href attribute holds the destination.",
        "syntax": '<a href="url">Text</a>',
        "usage": "Navigation between pages",
        "code": '<a href="https://example.com">Visit</a>\n<a href="page.html">Internal Link</a>\n<a href="#section">Jump to Section</a>',
    },
    {
        "title": "Images",
        "description": "Embed images with the img tag. Always describe the image in the alt attribute.",
        "syntax": '<img src="path" alt="desc">',
        "usage": "Display images",
        "code": '<img src="photo.jpg" alt="Description" width="300">',
    },
    {
        "title": "Lists",
        "description": "Create ordered (ol) and unordered (ul) lists whose items are li elements.",
        "syntax": "<ul>, <ol>, <li>",
        "usage": "Organize items",
        "code": "<ul>\n  <li>Item 1</li>\n  <li>Item 2</li>\n</ul>\n\n<ol>\n  <li>First</li>\n  <li>Second</li>\n</ol>",
    },
    {
        "title": "Tables",
        "description": "Display tabular data with table, tr, th and td.",
        "syntax": "<table>, <tr>, <th>, <td>",
        "usage": "Organize data in rows/columns",
        "code": "<table>\n  <tr>\n    <th>Name</th>\n    <th>Age</th>\n  </tr>\n  <tr>\n    <td>John</td>\n    <td>25</td>\n  </tr>\n</table>",
    },
    {
        "title": "Forms",
        "description": "Collect user input with forms, labels, inputs and buttons.",
        "syntax": "<form>, <input>, <button>",
        "usage": "User data collection",
        "code": '<form action="/submit" method="POST">\n  <label for="name">Name:</label>\n  <input id="name" type="text" name="name" required>\n  <button type="submit">Submit</button>\n</form>',
    },
    {
        "title": "Input Types",
        "description": "HTML5 provides many input types with built-in validation.",
        "syntax": "text, email, password, number, date, checkbox, radio",
        "usage": "Different inputs for different data",
        "code": '<input type="email" required>\n<input type="password">\n<input type="number" min="0" max="100">\n<input type="date">\n<input type="checkbox" id="agree">\n<input type="radio" name="choice" value="a">',
    },
    {
        "title": "Semantic HTML",
        "description": "Semantic tags describe the meaning of their content, which helps accessibility and search engines.",
        "syntax": "<header>, <nav>, <main>, <article>, <footer>",
        "usage": "Meaningful structure, better SEO",
        "code": "<header>\n  <nav><!-- Navigation --></nav>\n</header>\n<main>\n  <article><!-- Content --></article>\n</main>\n<footer><!-- Footer --></footer>",
    },
    {
        "title": "Div and Span",
        "description": "Generic block (div) and inline (span) containers for grouping and styling.",
        "syntax": "<div>, <span>",
        "usage": "Layout and styling containers",
        "code": '<div class="container">\n  <p>Text with <span class="highlight">highlighted</span> word.</p>\n</div>',
    },
    {
        "title": "Attributes",
        "description": "Attributes provide additional information about an element.",
        "syntax": "id, class, style, data-*",
        "usage": "Customize elements",
        "code": '<div id="main" class="container" data-role="admin">\n  <p style="color: blue;">Content</p>\n</div>',
    },
    {
        "title": "Media Elements",
        "description": "Embed audio and video with native controls.",
        "syntax": "<audio>, <video>",
        "usage": "Multimedia content",
        "code": '<video width="640" height="360" controls>\n  <source src="video.mp4" type="video/mp4">\n</video>',
    },
    {
        "title": "Meta Tags",
        "description": "Metadata in the head controls encoding, responsive behaviour and search snippets.",
        "syntax": "<meta>",
        "usage": "Page information, SEO",
        "code": '<meta charset="UTF-8">\n<meta name="viewport" content="width=device-width, initial-scale=1.0">\n<meta name="description" content="Page description">',
    },
    {
        "title": "Best Practices",
        "description": "Use semantic HTML, validate markup and keep indentation consistent.",
        "syntax": "N/A",
        "usage": "Maintainable, accessible code",
        "code": '<!-- Good: semantic, clean -->\n<header>\n  <h1>Title</h1>\n  <nav><a href="#home">Home</a></nav>\n</header>\n\n<!-- Bad: non-semantic, inline styles -->\n<div style="color:red">Title</div>',
    },
    {
        "title": "Project: Portfolio Page",
        "description": "Build a personal portfolio page that combines everything from this {name} tutorial.",
        "syntax": "N/A",
        "usage": "Apply all HTML skills",
        "code": '<!DOCTYPE html>\n<html>\n<head>\n  <meta charset="UTF-8">\n  <title>My Portfolio</title>\n</head>\n<body>\n  <header>\n    <h1>Jane Doe</h1>\n    <nav>\n      <a href="#about">About</a>\n      <a href="#projects">Projects</a>\n    </nav>\n  </header>\n  <main>\n    <section id="about">\n      <h2>About Me</h2>\n      <p>I build websites.</p>\n    </section>\n  </main>\n  <footer>&copy; 2024</footer>\n</body>\n</html>',
    },
)


def markup_specs(name: str) -> list[SectionSpec]:
    """Lessons for HTML and other markup languages."""
    return lessons(name, MARKUP_LESSONS)
