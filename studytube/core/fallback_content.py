"""
Synthetic transcript text used when no captions can be fetched.

Nothing here comes from the video itself; it is built from the title and
description only.
"""

from studytube.utils.logger import logging

TOPIC_CONTENT = {
    "dom": (
        "This video covers Document Object Model (DOM) concepts, explaining how to interact "
        "with HTML elements using JavaScript. The content includes practical examples of DOM "
        "manipulation techniques, element selection methods, event handling, and dynamic "
        "content modification. Students learn how to access, modify, and create HTML elements "
        "programmatically, understanding the structure and hierarchy of web pages. The tutorial "
        "demonstrates real-world applications of DOM programming for interactive web development."
    ),
    "javascript": (
        "This comprehensive JavaScript tutorial covers fundamental programming concepts and "
        "practical implementation techniques. The video explains variables, functions, control "
        "structures, and modern JavaScript features. Students learn through hands-on examples "
        "that demonstrate real-world coding scenarios. The content includes best practices for "
        "JavaScript development, debugging techniques, and common programming patterns used in "
        "web development."
    ),
    "css": (
        "This CSS tutorial covers styling techniques and layout principles for web development. "
        "The video demonstrates practical approaches to creating responsive designs, "
        "understanding selectors, and implementing modern CSS features. Students learn how to "
        "structure stylesheets effectively and create visually appealing web interfaces."
    ),
}

GENERIC_CONTENT = (
    "This educational content provides structured learning with clear explanations and "
    "practical examples. The video covers key concepts through step-by-step instruction, "
    "helping students build comprehensive understanding. The tutorial includes real-world "
    "applications and demonstrates best practices in the subject area."
)

LEARNING_OBJECTIVES = """Key Learning Objectives:
- Understanding core concepts and terminology
- Practical application through hands-on examples
- Building foundational knowledge for advanced topics
- Developing problem-solving skills in the subject area

The instructional approach emphasizes:
- Step-by-step methodology for complex topics
- Real-world examples and use cases
- Interactive learning through practical demonstrations
- Progressive skill building from basic to advanced concepts

Students will gain practical experience and theoretical understanding that can be immediately \
applied in professional and academic contexts. The content is structured to accommodate \
different learning styles and provides comprehensive coverage of essential topics in the field."""


def topic_content(title: str) -> str:
    """Pick the topic paragraph for the first keyword found in the title."""
    lower_title = (title or "").lower()
    for keyword, content in TOPIC_CONTENT.items():
        if keyword in lower_title:
            return content
    return GENERIC_CONTENT


def generate_fallback_content(title: str, description: str = "") -> str:
    """Build filler transcript text from the video title and description."""
    logging.info(f"Generating fallback content for: \"{title}\"")

    base = f"This educational video titled \"{title}\" provides comprehensive instruction on the topic. "
    desc = f"The video content includes: {description}. " if description else ""

    return (
        f"{base}{desc}{topic_content(title)} The video content is designed to help learners "
        "progress systematically through the material with practical applications and "
        "comprehensive coverage of essential topics."
    )


def generate_enhanced_fallback_content(title: str, description: str, video_id: str) -> str:
    """Fallback content with learning-objective boilerplate appended."""
    logging.info(f"Generating enhanced fallback content for video: {video_id}")
    return f"{generate_fallback_content(title, description)}\n\n{LEARNING_OBJECTIVES}"
