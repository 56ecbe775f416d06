"""Static content of the built-in topic templates.

Node rows are ``(id, name, val, category, description)``; link rows are
``(source, target, value, label)``.
"""

from __future__ import annotations

MACHINE_LEARNING_NODES = (
    # Central node
    ("machine-learning", "Machine Learning", 100, "topic",
     "Computational field enabling systems to learn from data and make predictions"),
    # Primary concepts
    ("supervised-learning", "Supervised Learning", 85, "concept",
     "Training algorithms using labeled examples to predict outcomes"),
    ("unsupervised-learning", "Unsupervised Learning", 80, "concept",
     "Finding patterns in unlabeled data without predefined targets"),
    ("neural-networks", "Neural Networks", 90, "concept",
     "Interconnected layers of nodes inspired by biological neurons"),
    ("deep-learning", "Deep Learning", 88, "concept",
     "Using multi-layer neural networks for complex pattern recognition"),
    ("reinforcement-learning", "Reinforcement Learning", 82, "concept",
     "Training agents to make sequential decisions through reward systems"),
    ("nlp", "Natural Language Processing", 78, "concept",
     "Techniques for machines to understand and generate human language"),
    # Supervised learning
    ("regression", "Regression", 65, "skill",
     "Predicting continuous numerical values from input features"),
    ("classification", "Classification", 70, "skill",
     "Categorizing data into predefined discrete classes or labels"),
    ("decision-trees", "Decision Trees", 60, "concept",
     "Tree-structured models for making decisions based on feature splits"),
    ("svm", "Support Vector Machines", 62, "skill",
     "Finding optimal hyperplanes to separate classes in high dimensions"),
    # Unsupervised learning
    ("clustering", "Clustering", 68, "skill",
     "Grouping similar data points into clusters based on similarity metrics"),
    ("dimensionality-reduction", "Dimensionality Reduction", 64, "skill",
     "Reducing data features while preserving important information"),
    ("pca", "Principal Component Analysis", 58, "concept",
     "Statistical technique for linear dimensionality reduction"),
    ("anomaly-detection", "Anomaly Detection", 61, "skill",
     "Identifying unusual patterns or outliers in datasets"),
    # Neural networks
    ("convolutional-networks", "Convolutional Networks", 75, "concept",
     "Neural networks using convolutional layers for image processing"),
    ("recurrent-networks", "Recurrent Networks", 72, "concept",
     "Neural networks with feedback connections for sequential data"),
    ("backpropagation", "Backpropagation", 68, "skill",
     "Algorithm for computing gradients in neural network training"),
    ("activation-functions", "Activation Functions", 55, "concept",
     "Non-linear functions introducing expressiveness to neural networks"),
    ("gradient-descent", "Gradient Descent", 66, "skill",
     "Iterative optimization method following the negative gradient of a loss"),
    # Deep learning
    ("transformers", "Transformers", 88, "concept",
     "Architecture using attention mechanisms for sequence processing"),
    ("attention-mechanisms", "Attention Mechanisms", 80, "skill",
     "Allowing models to focus on relevant parts of input data"),
    ("gpu-computing", "GPU Computing", 70, "skill",
     "Leveraging graphics processors for accelerating computations"),
    ("batch-normalization", "Batch Normalization", 58, "concept",
     "Technique stabilizing training and improving convergence"),
    # Reinforcement learning
    ("q-learning", "Q-Learning", 68, "skill",
     "Model-free algorithm for learning optimal action values"),
    ("policy-gradient", "Policy Gradient", 65, "skill",
     "Methods directly optimizing the policy function"),
    ("markov-decisions", "Markov Decision Process", 62, "concept",
     "Mathematical framework for sequential decision making"),
    # NLP
    ("word-embeddings", "Word Embeddings", 72, "skill",
     "Representing words as dense vectors in continuous space"),
    ("language-models", "Language Models", 80, "concept",
     "Models predicting probability distributions over text sequences"),
    ("tokenization", "Tokenization", 55, "skill",
     "Breaking text into meaningful units for processing"),
    # Researchers
    ("yann-lecun", "Yann LeCun", 75, "person",
     "Pioneer in convolutional neural networks and deep learning"),
    ("yoshua-bengio", "Yoshua Bengio", 73, "person",
     "Leading researcher in deep learning and neural networks"),
    ("geoffrey-hinton", "Geoffrey Hinton", 76, "person",
     "Pioneering work in backpropagation and neural networks"),
)

MACHINE_LEARNING_LINKS = (
    # Central to primary concepts
    ("machine-learning", "supervised-learning", 15, "includes"),
    ("machine-learning", "unsupervised-learning", 15, "includes"),
    ("machine-learning", "neural-networks", 16, "uses"),
    ("machine-learning", "deep-learning", 14, "advances"),
    ("machine-learning", "reinforcement-learning", 12, "includes"),
    ("machine-learning", "nlp", 13, "applies-to"),
    # Supervised learning
    ("supervised-learning", "regression", 12, "technique"),
    ("supervised-learning", "classification", 13, "technique"),
    ("supervised-learning", "decision-trees", 10, "algorithm"),
    ("supervised-learning", "svm", 11, "algorithm"),
    # Unsupervised learning
    ("unsupervised-learning", "clustering", 12, "technique"),
    ("unsupervised-learning", "dimensionality-reduction", 11, "technique"),
    ("unsupervised-learning", "pca", 9, "algorithm"),
    ("unsupervised-learning", "anomaly-detection", 10, "technique"),
    # Neural networks
    ("neural-networks", "convolutional-networks", 13, "architecture"),
    ("neural-networks", "recurrent-networks", 13, "architecture"),
    ("neural-networks", "backpropagation", 14, "training-method"),
    ("neural-networks", "activation-functions", 11, "component"),
    # Deep learning
    ("deep-learning", "transformers", 14, "modern-architecture"),
    ("deep-learning", "attention-mechanisms", 13, "technique"),
    ("deep-learning", "gpu-computing", 12, "requires"),
    ("deep-learning", "batch-normalization", 10, "technique"),
    # Reinforcement learning
    ("reinforcement-learning", "q-learning", 12, "algorithm"),
    ("reinforcement-learning", "policy-gradient", 11, "method"),
    ("reinforcement-learning", "markov-decisions", 12, "foundation"),
    # NLP
    ("nlp", "word-embeddings", 12, "technique"),
    ("nlp", "language-models", 14, "primary-approach"),
    ("nlp", "tokenization", 10, "preprocessing"),
    # Cross-domain
    ("neural-networks", "deep-learning", 15, "foundation"),
    ("convolutional-networks", "deep-learning", 12, "breakthrough"),
    ("transformers", "attention-mechanisms", 14, "uses"),
    ("transformers", "nlp", 13, "powers"),
    ("language-models", "transformers", 12, "architecture"),
    ("backpropagation", "gradient-descent", 11, "enables"),
    ("classification", "convolutional-networks", 10, "task"),
    # Researchers
    ("yann-lecun", "convolutional-networks", 14, "pioneered"),
    ("yann-lecun", "deep-learning", 12, "contributed-to"),
    ("yoshua-bengio", "deep-learning", 13, "advanced"),
    ("yoshua-bengio", "backpropagation", 11, "developed"),
    ("geoffrey-hinton", "backpropagation", 13, "pioneered"),
    ("geoffrey-hinton", "neural-networks", 12, "founded"),
)

WEB_DEVELOPMENT_NODES = (
    ("web-development", "Web Development", 100, "topic",
     "Creating interactive applications and websites for the internet"),
    # Primary concepts
    ("frontend", "Frontend Development", 85, "concept",
     "Building user interfaces and client-side applications"),
    ("backend", "Backend Development", 83, "concept",
     "Server-side logic, databases, and business logic implementation"),
    ("devops", "DevOps", 75, "concept",
     "Infrastructure, deployment, and operations automation"),
    ("mobile-web", "Mobile Web Development", 72, "concept",
     "Building responsive and mobile-optimized web applications"),
    ("web-performance", "Web Performance", 70, "concept",
     "Optimizing speed, efficiency, and user experience metrics"),
    ("security", "Web Security", 76, "concept",
     "Protecting applications and users from vulnerabilities"),
    # Frontend
    ("html-css", "HTML & CSS", 78, "skill",
     "Markup and styling languages for web pages"),
    ("javascript", "JavaScript", 82, "skill",
     "Primary programming language for client-side interactivity"),
    ("react", "React", 75, "concept",
     "Library for building dynamic user interfaces with components"),
    ("vue", "Vue.js", 68, "concept",
     "Progressive framework for building user interfaces"),
    ("typescript", "TypeScript", 72, "skill",
     "Type-safe superset of JavaScript for large-scale projects"),
    # Backend
    ("nodejs", "Node.js", 80, "concept",
     "JavaScript runtime for server-side development"),
    ("databases", "Databases", 77, "concept",
     "Systems for storing and retrieving structured data"),
    ("rest-api", "REST APIs", 76, "skill",
     "Standard architecture for building web service endpoints"),
    ("graphql", "GraphQL", 68, "concept",
     "Query language for flexible API data fetching"),
    ("sql", "SQL", 74, "skill",
     "Language for querying and managing relational databases"),
    # DevOps
    ("docker", "Docker", 72, "concept",
     "Containerization platform for application deployment"),
    ("kubernetes", "Kubernetes", 68, "concept",
     "Orchestration system for managing containerized applications"),
    ("ci-cd", "CI/CD Pipelines", 70, "skill",
     "Automated testing and deployment workflows"),
    # Mobile web
    ("responsive-design", "Responsive Design", 66, "skill",
     "Adapting layouts to different screen sizes"),
    ("pwa", "Progressive Web Apps", 65, "concept",
     "Web apps with app-like capabilities offline support"),
    # Performance
    ("optimization", "Performance Optimization", 68, "skill",
     "Techniques for improving application speed and efficiency"),
    ("caching", "Caching Strategies", 62, "skill",
     "Storing frequently accessed data for faster retrieval"),
    # Security
    ("authentication", "Authentication", 70, "skill",
     "Verifying user identity through secure mechanisms"),
    ("encryption", "Encryption", 68, "skill",
     "Protecting sensitive data through cryptographic techniques"),
    # Tools
    ("vite", "Vite", 60, "concept",
     "Next-generation build tool for fast development"),
    ("webpack", "Webpack", 58, "concept",
     "Module bundler for JavaScript applications"),
    ("git", "Git", 72, "skill",
     "Version control system for code collaboration"),
)

WEB_DEVELOPMENT_LINKS = (
    # Central to primary
    ("web-development", "frontend", 15, "includes"),
    ("web-development", "backend", 15, "includes"),
    ("web-development", "devops", 12, "requires"),
    ("web-development", "mobile-web", 11, "includes"),
    ("web-development", "web-performance", 12, "prioritizes"),
    ("web-development", "security", 13, "requires"),
    # Frontend
    ("frontend", "html-css", 13, "foundation"),
    ("frontend", "javascript", 14, "core-language"),
    ("frontend", "react", 12, "popular-framework"),
    ("frontend", "vue", 10, "alternative-framework"),
    ("frontend", "typescript", 11, "enhances"),
    ("javascript", "typescript", 12, "extends"),
    ("react", "vite", 10, "uses"),
    ("vue", "vite", 9, "integrates-with"),
    # Backend
    ("backend", "nodejs", 13, "popular-runtime"),
    ("backend", "databases", 13, "uses"),
    ("backend", "rest-api", 12, "builds"),
    ("backend", "graphql", 10, "alternative-to"),
    ("rest-api", "graphql", 9, "compared-to"),
    ("databases", "sql", 12, "uses"),
    # DevOps
    ("devops", "docker", 12, "uses"),
    ("devops", "kubernetes", 11, "orchestrates-with"),
    ("devops", "ci-cd", 13, "automates"),
    ("docker", "kubernetes", 11, "works-with"),
    # Mobile web
    ("mobile-web", "responsive-design", 12, "requires"),
    ("mobile-web", "pwa", 11, "emerging-pattern"),
    # Performance
    ("web-performance", "optimization", 12, "technique"),
    ("web-performance", "caching", 11, "strategy"),
    # Security
    ("security", "authentication", 12, "method"),
    ("security", "encryption", 11, "technique"),
    # Build tools
    ("frontend", "webpack", 10, "uses"),
    ("nodejs", "git", 10, "version-control"),
    # Cross-domain
    ("nodejs", "devops", 11, "deployed-via"),
    ("javascript", "nodejs", 13, "runtime"),
    ("backend", "ci-cd", 10, "automated-by"),
)

QUANTUM_COMPUTING_NODES = (
    ("quantum-computing", "Quantum Computing", 100, "topic",
     "Computational systems leveraging quantum mechanical phenomena"),
    ("quantum-mechanics", "Quantum Mechanics", 88, "concept",
     "Physics of matter and energy at atomic and subatomic scales"),
    ("qubits", "Qubits", 85, "concept",
     "Quantum bits that exist in superposition of 0 and 1"),
    ("quantum-gates", "Quantum Gates", 80, "skill",
     "Operations manipulating qubit states in quantum circuits"),
    ("quantum-algorithms", "Quantum Algorithms", 82, "concept",
     "Computational procedures designed for quantum computers"),
    ("error-correction", "Quantum Error Correction", 75, "concept",
     "Protecting quantum information from decoherence errors"),
    ("quantum-applications", "Quantum Applications", 70, "project",
     "Real-world problems solved using quantum computing"),
    ("superposition", "Superposition", 78, "concept",
     "Property of qubits existing in multiple states simultaneously"),
    ("entanglement", "Entanglement", 76, "concept",
     "Correlation between qubits independent of distance"),
    ("shors-algorithm", "Shor Algorithm", 72, "skill",
     "Quantum algorithm for integer factorization efficiently"),
    ("grovers-algorithm", "Grover Algorithm", 68, "skill",
     "Quantum search algorithm providing quadratic speedup"),
    ("quantum-simulation", "Quantum Simulation", 65, "skill",
     "Simulating quantum systems on quantum computers"),
    ("ibm-quantum", "IBM Quantum", 60, "resource",
     "Cloud-based quantum computing platform and services"),
    ("google-sycamore", "Google Sycamore", 62, "resource",
     "Google quantum processor demonstrating quantum supremacy"),
    ("quantum-supremacy", "Quantum Supremacy", 64, "concept",
     "Milestone where a quantum device outperforms classical supercomputers"),
    ("cryptography", "Post-Quantum Cryptography", 70, "skill",
     "Encryption resistant to quantum computing attacks"),
    ("drug-discovery", "Drug Discovery", 58, "project",
     "Quantum simulations accelerating pharmaceutical research"),
    ("optimization", "Combinatorial Optimization", 64, "skill",
     "Solving complex optimization problems quantum speedup"),
    ("variational-algorithms", "Variational Algorithms", 66, "concept",
     "Hybrid quantum-classical algorithms for near-term devices"),
    ("david-deutsch", "David Deutsch", 70, "person",
     "Founder of quantum computing field theoretical physicist"),
    ("richard-feynman", "Richard Feynman", 72, "person",
     "Visionary proposing quantum computers could simulate nature"),
)

QUANTUM_COMPUTING_LINKS = (
    ("quantum-computing", "quantum-mechanics", 15, "based-on"),
    ("quantum-computing", "qubits", 14, "fundamental-unit"),
    ("quantum-computing", "quantum-gates", 13, "uses"),
    ("quantum-computing", "quantum-algorithms", 14, "implements"),
    ("quantum-computing", "error-correction", 12, "requires"),
    ("quantum-computing", "quantum-applications", 11, "enables"),
    ("qubits", "superposition", 13, "exhibits"),
    ("qubits", "entanglement", 12, "exhibits"),
    ("quantum-gates", "superposition", 11, "manipulates"),
    ("quantum-algorithms", "shors-algorithm", 12, "includes"),
    ("quantum-algorithms", "grovers-algorithm", 11, "includes"),
    ("quantum-algorithms", "quantum-simulation", 10, "includes"),
    ("quantum-algorithms", "variational-algorithms", 10, "includes"),
    ("shors-algorithm", "cryptography", 12, "threatens"),
    ("grovers-algorithm", "optimization", 10, "enables"),
    ("quantum-simulation", "drug-discovery", 11, "accelerates"),
    ("variational-algorithms", "optimization", 11, "solves"),
    ("david-deutsch", "quantum-computing", 13, "founded"),
    ("richard-feynman", "quantum-computing", 13, "pioneered"),
    ("richard-feynman", "quantum-simulation", 11, "proposed"),
    ("ibm-quantum", "quantum-gates", 10, "provides"),
    ("google-sycamore", "quantum-supremacy", 11, "demonstrates"),
    ("error-correction", "quantum-gates", 10, "protects"),
)
