"""Static stylesheet for the blog-* classes emitted by the renderer"""


BLOG_STYLES = """\
.blog-content {
    max-width: 800px;
    margin: 0 auto;
    padding: 2rem;
    font-family: "JetBrains Mono", monospace;
    line-height: 1.6;
    color: #fff;
    background-color: #000;
}

.blog-heading {
    background: linear-gradient(135deg, #00ffff, #8a2be2);
    -webkit-background-clip: text;
    -webkit-text-fill-color: transparent;
    background-clip: text;
    margin: 2rem 0 1rem 0;
    font-weight: 600;
}

.blog-heading:first-child {
    margin-top: 0;
}

.blog-paragraph {
    margin: 1rem 0;
    color: #ccc;
}

.blog-bold {
    font-weight: 600;
    background: linear-gradient(135deg, #00ffff, #8a2be2);
    -webkit-background-clip: text;
    -webkit-text-fill-color: transparent;
    background-clip: text;
}

.blog-italic {
    font-style: italic;
    color: #aaa;
}

.blog-inline-code {
    background-color: #111;
    color: #00ffff;
    padding: 0.2rem 0.4rem;
    border-radius: 0.25rem;
    font-size: 0.9em;
    border: 1px solid #333;
}

.blog-code-block {
    background-color: #111;
    color: #ccc;
    padding: 1rem;
    border-radius: 0.5rem;
    overflow-x: auto;
    margin: 1.5rem 0;
    border: 1px solid #333;
}

.blog-code {
    font-family: "JetBrains Mono", monospace;
    font-size: 0.9em;
}

.blog-link {
    color: #00ffff;
    text-decoration: none;
    border-bottom: 1px solid transparent;
    transition: border-color 0.2s ease;
}

.blog-link:hover {
    border-bottom-color: #00ffff;
}

.blog-image {
    max-width: 100%;
    height: auto;
    border-radius: 0.5rem;
    margin: 1rem 0;
    border: 1px solid #333;
}

.blog-list {
    margin: 1rem 0;
    padding-left: 2rem;
}

.blog-list-item {
    margin: 0.5rem 0;
    color: #ccc;
}

.blog-ordered-list {
    list-style-type: decimal;
}

.blog-blockquote {
    border-left: 4px solid #8a2be2;
    padding-left: 1rem;
    margin: 1.5rem 0;
    color: #aaa;
    font-style: italic;
}

.blog-hr {
    border: none;
    height: 1px;
    background: linear-gradient(135deg, #00ffff, #8a2be2);
    margin: 2rem 0;
}

.blog-meta {
    border-bottom: 1px solid #333;
    padding-bottom: 1rem;
    margin-bottom: 2rem;
}

.blog-title {
    font-size: 2rem;
    font-weight: 700;
    margin-bottom: 0.5rem;
    background: linear-gradient(135deg, #00ffff, #8a2be2);
    -webkit-background-clip: text;
    -webkit-text-fill-color: transparent;
    background-clip: text;
}

.blog-meta-info {
    display: flex;
    gap: 1rem;
    font-size: 0.9rem;
    color: #888;
    flex-wrap: wrap;
}

.blog-tags {
    display: flex;
    gap: 0.5rem;
    margin-top: 0.5rem;
    flex-wrap: wrap;
}

.blog-tag {
    background-color: #111;
    color: #00ffff;
    padding: 0.25rem 0.5rem;
    border-radius: 0.25rem;
    font-size: 0.8rem;
    border: 1px solid #333;
}

@media (max-width: 768px) {
    .blog-content {
        padding: 1rem;
    }

    .blog-title {
        font-size: 1.5rem;
    }

    .blog-meta-info {
        flex-direction: column;
        gap: 0.5rem;
    }

    .blog-list {
        padding-left: 1.5rem;
    }
}
"""


def generate_styles() -> str:
    """Return the stylesheet covering every class the renderer and exporter emit."""
    return BLOG_STYLES
