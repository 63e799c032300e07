"""Children schema for the ES2022 edition of ESTree.

Every concrete node type of ESTree up to ES2022, with the properties that
can reference other nodes in ESTree field order (inherited fields first).
Source locations, regexes and operator enums are not children.
"""

from .schema import ChildrenSchema

ES2022 = ChildrenSchema({
    "Identifier": [],
    "Literal": [],
    "Program": ["body"],

    # Statements
    "ExpressionStatement": ["expression"],
    "BlockStatement": ["body"],
    "StaticBlock": ["body"],
    "EmptyStatement": [],
    "DebuggerStatement": [],
    "WithStatement": ["object", "body"],
    "ReturnStatement": ["argument"],
    "LabeledStatement": ["label", "body"],
    "BreakStatement": ["label"],
    "ContinueStatement": ["label"],
    "IfStatement": ["test", "consequent", "alternate"],
    "SwitchStatement": ["discriminant", "cases"],
    "SwitchCase": ["test", "consequent"],
    "ThrowStatement": ["argument"],
    "TryStatement": ["block", "handler", "finalizer"],
    "CatchClause": ["param", "body"],
    "WhileStatement": ["test", "body"],
    "DoWhileStatement": ["body", "test"],
    "ForStatement": ["init", "test", "update", "body"],
    "ForInStatement": ["left", "right", "body"],
    "ForOfStatement": ["left", "right", "body"],

    # Declarations
    "FunctionDeclaration": ["id", "params", "body"],
    "VariableDeclaration": ["declarations"],
    "VariableDeclarator": ["id", "init"],
    "ClassDeclaration": ["id", "superClass", "body"],

    # Expressions
    "ThisExpression": [],
    "Super": [],
    "ArrayExpression": ["elements"],
    "ObjectExpression": ["properties"],
    "Property": ["key", "value"],
    "FunctionExpression": ["id", "params", "body"],
    "ArrowFunctionExpression": ["id", "params", "body"],
    "UnaryExpression": ["argument"],
    "UpdateExpression": ["argument"],
    "BinaryExpression": ["left", "right"],
    "AssignmentExpression": ["left", "right"],
    "LogicalExpression": ["left", "right"],
    "MemberExpression": ["object", "property"],
    "ChainExpression": ["expression"],
    "ConditionalExpression": ["test", "alternate", "consequent"],
    "CallExpression": ["callee", "arguments"],
    "NewExpression": ["callee", "arguments"],
    "SequenceExpression": ["expressions"],
    "SpreadElement": ["argument"],
    "YieldExpression": ["argument"],
    "AwaitExpression": ["argument"],
    "ImportExpression": ["source"],
    "TemplateLiteral": ["quasis", "expressions"],
    "TaggedTemplateExpression": ["tag", "quasi"],
    "TemplateElement": [],
    "ClassExpression": ["id", "superClass", "body"],
    "MetaProperty": ["meta", "property"],

    # Patterns
    "ObjectPattern": ["properties"],
    "ArrayPattern": ["elements"],
    "RestElement": ["argument"],
    "AssignmentPattern": ["left", "right"],

    # Classes
    "ClassBody": ["body"],
    "MethodDefinition": ["key", "value"],
    "PropertyDefinition": ["key", "value"],
    "PrivateIdentifier": [],

    # Modules
    "ImportDeclaration": ["specifiers", "source"],
    "ImportSpecifier": ["local", "imported"],
    "ImportDefaultSpecifier": ["local"],
    "ImportNamespaceSpecifier": ["local"],
    "ExportNamedDeclaration": ["declaration", "specifiers", "source"],
    "ExportSpecifier": ["local", "exported"],
    "ExportDefaultDeclaration": ["declaration"],
    "ExportAllDeclaration": ["source", "exported"],
})
