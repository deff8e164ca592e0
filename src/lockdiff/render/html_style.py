STYLESHEET = """
* {
    margin: 0;
    padding: 0;
    box-sizing: border-box;
}

body {
    font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, Ubuntu, sans-serif;
    line-height: 1.6;
    max-width: 800px;
    margin: 0 auto;
    padding: 2rem 1rem;
    color: hsl(222.2 84% 4.9%);
    background-color: hsl(0 0% 100%);
}

h2 {
    font-size: 1.875rem;
    font-weight: 600;
    margin: 2rem 0 1rem;
    padding-bottom: .5rem;
    border-bottom: 1px solid;
}

summary {
    cursor: pointer;
}

summary h2 {
    display: inline-block;
    width: calc(100% - 2rem);
    padding-left: 1rem;
}

.contents {
    margin-left: 1.5rem;
    margin-bottom: 3rem;
}

table {
    width: 100%;
    border-collapse: collapse;
    margin-bottom: 2rem;
    border: 1px solid;
}

th,
td {
    padding: .75rem 1rem;
    border-bottom: 1px solid;
    font-size: .875rem;
    text-align: left;
}

th {
    font-weight: 600;
    background-color: hsl(210 40% 98%);
}

td:nth-child(2),
td:nth-child(3),
td:nth-child(4) {
    font-family: ui-monospace, SFMono-Regular, Consolas, Menlo, monospace;
    font-size: .8125rem;
}

td:first-child {
    font-weight: 500;
    font-size: .75rem;
    text-transform: uppercase;
}

.added {
    background-color: hsl(143 85% 96%);
    border-left: 3px solid hsl(142 76% 36%);
}

.removed {
    background-color: hsl(0 86% 97%);
    border-left: 3px solid hsl(0 84% 60%);
}

.updated {
    background-color: hsl(48 100% 96%);
    border-left: 3px solid hsl(45 93% 47%);
}

.unchanged {
    background-color: hsl(210 40% 98%);
    border-left: 3px solid hsl(215 16% 47%);
}

.summary-table td:first-child {
    text-transform: none;
    font-weight: 600;
    font-size: .875rem;
}

.summary-table .added {
    color: hsl(142 76% 36%);
}

.summary-table .removed {
    color: hsl(0 84% 60%);
}

.summary-table .updated {
    color: hsl(45 93% 47%);
}

.summary-table .unchanged {
    color: hsl(215 16% 47%);
}

@media (prefers-color-scheme: dark) {
    body,
    table {
        color: hsl(210 40% 98%);
        background-color: hsl(222.2 84% 4.9%);
    }

    th {
        background-color: hsl(217.2 32.6% 17.5%);
    }

    .added {
        background-color: hsl(142 76% 6%);
    }

    .removed {
        background-color: hsl(0 84% 6%);
    }

    .updated {
        background-color: hsl(45 93% 6%);
    }

    .unchanged {
        background-color: hsl(217.2 32.6% 17.5%);
    }
}
"""
