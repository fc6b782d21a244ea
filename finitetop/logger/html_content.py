CSS_LOG = """
/* Base styles */
body {
    font-family: monospace;
    background: #1e1e1e;
    color: #d4d4d4;
}

.section {
    margin: 1.5em 0;
    padding: 1em;
    background: #2d2d2d;
    border-radius: 4px;
}

.info {
    margin: 0.25em 0;
}

.warning {
    color: #e5c07b;
}

.error {
    color: #ff8080;
}

.debug {
    color: #7f848e;
}

.result strong {
    color: #61afef;
}

.table-container table {
    border-collapse: collapse;
}

.table-container th,
.table-container td {
    border: 1px solid #444;
    padding: 4px 12px;
}
"""
